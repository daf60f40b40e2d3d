"""Domain errors raised by the services and translated by the routers."""

from typing import List


class FitpointsError(Exception):
    """Base class for all service-level errors."""


class SchemaError(FitpointsError):
    """Import header is missing one or more required columns."""

    def __init__(self, missing_columns: List[str]):
        self.missing_columns = list(missing_columns)
        super().__init__(f"Missing required headers: {', '.join(self.missing_columns)}")


class ConflictError(FitpointsError):
    """A completion event already exists for the (user, habit, day) key."""


class NotFoundError(FitpointsError):
    """A referenced row (event, habit, student, user) does not exist."""


class PersistenceError(FitpointsError):
    """The underlying storage failed."""
