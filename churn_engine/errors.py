"""Exception taxonomy for the churn risk engine."""


class ChurnEngineError(Exception):
    """Base class for application errors."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ChurnEngineError):
    """Raised when caller input is missing or out of range."""

    status_code = 400

    def __init__(self, message: str = "Invalid input", field: str | None = None):
        super().__init__(message)
        self.field = field


class ConflictError(ChurnEngineError):
    """Raised when a unique key (email) is already taken."""

    status_code = 400

    def __init__(self, message: str = "Customer with this email already exists"):
        super().__init__(message)


class NotFoundError(ChurnEngineError):
    """Raised when a customer id does not resolve."""

    status_code = 404

    def __init__(self, message: str = "Customer not found"):
        super().__init__(message)


class StorageError(ChurnEngineError):
    """Raised when the storage collaborator fails."""

    status_code = 500
