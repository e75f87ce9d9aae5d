"""
Error taxonomy shared by the services.

Services raise these; the HTTP layer (app.api.errors) is the only place that
turns them into status codes.
"""


class FitnessTrackerError(Exception):
    """Base class for every error the API knows how to render."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidOperationError(FitnessTrackerError):
    """A user-caused precondition violation (bad value, terminal log, ...)."""


class NotFoundError(FitnessTrackerError):
    """The addressed entity does not exist."""


class AccessDeniedError(FitnessTrackerError):
    """The ownership gate rejected the request.

    Raised for both missing and foreign records so callers cannot probe for
    existence.
    """


class ConflictError(FitnessTrackerError):
    """A uniqueness rule of the catalog was violated."""
