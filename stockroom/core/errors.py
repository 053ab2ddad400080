"""Error taxonomy shared by the service layer, storage engines and presentation layers."""


class InvalidArgument(ValueError):
    """Raised when caller-supplied data violates a validation rule. Fix the input and retry."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotInitialized(RuntimeError):
    """Raised when a service is used before its storage collaborator has been configured."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class StorageFailure(Exception):
    """Raised when the storage engine cannot complete an operation (connection, constraint, driver)."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)
