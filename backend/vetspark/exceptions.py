"""
Errors raised by the coordinator services.

All of them are recoverable and reported to the caller; the REST layer maps
each one onto an HTTP status code.
"""


class ClinicError(ValueError):
    """Base class for coordinator errors."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ClinicError):
    """A referenced id does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class EmptyRosterError(ClinicError):
    """Walk-in registration attempted with no pet to attach to."""

    status_code = 409

    def __init__(self, message: str = "No pets registered to attach the walk-in to"):
        super().__init__(message)


class InvalidInputError(ClinicError):
    """Malformed draft or request."""

    status_code = 422
