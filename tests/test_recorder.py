"""Trip validation, pricing and ledger transitions."""

from datetime import datetime, timezone

import pytest

from carbon_trips.errors import InvalidInput, UnknownMonth, UnknownTransportMode
from carbon_trips.factors import canonical_mode, factor_for, factors
from carbon_trips.ledger import TripLedger
from carbon_trips.recorder import TripRecorder


def fixed_clock():
    return datetime(2025, 10, 3, 12, 0, tzinfo=timezone.utc)


def test_factor_table_has_four_positive_modes():
    rows = factors()
    assert [r.transport_mode for r in rows] == ["Car", "Bus", "Train", "Plane"]
    assert all(r.factor_kg_per_passenger_km > 0 for r in rows)


def test_factor_lookup_is_case_insensitive():
    assert factor_for("car") == 0.17
    assert canonical_mode(" PLANE ") == "Plane"


def test_unknown_mode_lookup():
    with pytest.raises(UnknownTransportMode):
        factor_for("Hovercraft")


@pytest.mark.parametrize(
    "passengers,distance,mode",
    [(1, 0.0, "Car"), (3, 12.5, "Bus"), (40, 300.0, "Train"), (2, 1500.0, "Plane")],
)
def test_add_prices_trip(passengers, distance, mode):
    ledger = TripLedger()
    record = TripRecorder(ledger).add(passengers, distance, "March", mode)

    assert len(ledger) == 1
    assert ledger.snapshot()[0] is record
    assert record.emissions_kg == pytest.approx(passengers * distance * factor_for(mode))


def test_car_scenario():
    ledger = TripLedger()
    record = TripRecorder(ledger, clock=fixed_clock).add(2, 100, "October", "Car")

    assert record.emissions_kg == pytest.approx(34.0)
    assert record.month == "October"
    assert record.recorded_at == fixed_clock()
    assert isinstance(record.distance_km, float)


def test_inputs_are_canonicalised():
    record = TripRecorder(TripLedger()).add(1, 10, "december", "train")
    assert record.month == "December"
    assert record.transport_mode == "Train"


@pytest.mark.parametrize(
    "kwargs,error",
    [
        (dict(passengers=0), InvalidInput),
        (dict(passengers=-2), InvalidInput),
        (dict(passengers=1.5), InvalidInput),
        (dict(passengers=True), InvalidInput),
        (dict(distance_km=-1.0), InvalidInput),
        (dict(distance_km=float("nan")), InvalidInput),
        (dict(distance_km="far"), InvalidInput),
        (dict(month="Smarch"), UnknownMonth),
        (dict(transport_mode="Rocket"), UnknownTransportMode),
    ],
)
def test_rejected_trip_leaves_ledger_unchanged(kwargs, error):
    ledger = TripLedger()
    recorder = TripRecorder(ledger)
    recorder.add(1, 10.0, "May", "Bus")

    args = dict(passengers=1, distance_km=10.0, month="May", transport_mode="Bus")
    args.update(kwargs)
    with pytest.raises(error):
        recorder.add(**args)

    assert len(ledger) == 1


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        TripRecorder(TripLedger()).add(0, 1.0, "May", "Bus")


def test_snapshot_is_not_affected_by_later_appends():
    ledger = TripLedger()
    recorder = TripRecorder(ledger)
    recorder.add(1, 5.0, "May", "Bus")
    before = ledger.snapshot()
    recorder.add(1, 5.0, "June", "Bus")

    assert len(before) == 1
    assert len(ledger.snapshot()) == 2


def test_clear_is_idempotent():
    ledger = TripLedger()
    TripRecorder(ledger).add(1, 5.0, "May", "Bus")
    ledger.clear()
    assert ledger.snapshot() == ()
    ledger.clear()
    assert ledger.snapshot() == ()
    assert ledger.is_empty


def test_insertion_order_matches_recorded_at():
    ledger = TripLedger()
    recorder = TripRecorder(ledger)
    for month in ("August", "September", "January"):
        recorder.add(1, 1.0, month, "Car")

    records = ledger.snapshot()
    assert [r.month for r in records] == ["August", "September", "January"]
    assert [r.recorded_at for r in records] == sorted(r.recorded_at for r in records)


def test_overflowing_emissions_are_rejected():
    ledger = TripLedger()
    with pytest.raises(InvalidInput):
        TripRecorder(ledger).add(10**6, 1e308, "October", "Car")
    assert len(ledger) == 0
