class TodoAppError(Exception):
    """Base class for failures surfaced by the data-access operations."""


class NotFoundError(TodoAppError):
    pass


class ConstraintViolationError(TodoAppError):
    """The store rejected a write (unique, foreign key or not-null constraint)."""


class DuplicateEmailError(ConstraintViolationError):
    def __init__(self, email: str):
        super().__init__(f"A user with email {email!r} already exists")
        self.email = email


class ConnectivityError(TodoAppError):
    """The database could not be reached or dropped the connection."""
