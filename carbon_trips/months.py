from typing import Dict

from .config import ACADEMIC_MONTHS
from .errors import UnknownMonth

# September -> 1 ... August -> 12. A lookup, not calendar arithmetic.
ACADEMIC_ORDER: Dict[str, int] = {name: i for i, name in enumerate(ACADEMIC_MONTHS, start=1)}

_BY_LOWER = {name.lower(): name for name in ACADEMIC_MONTHS}


def canonical_month(month: str) -> str:
    key = str(month).strip().lower() if month is not None else ""
    if key not in _BY_LOWER:
        raise UnknownMonth(f"Unknown month {month!r}.")
    return _BY_LOWER[key]


def academic_ordinal(month: str) -> int:
    return ACADEMIC_ORDER[canonical_month(month)]
