class TripInputError(ValueError):
    """Base class for a rejected trip. The ledger is unchanged when raised."""


class InvalidInput(TripInputError):
    """Passenger count below one or a negative / non-finite distance."""


class UnknownTransportMode(TripInputError):
    pass


class UnknownMonth(TripInputError):
    pass
