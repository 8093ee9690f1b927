"""Custom exceptions for MagasiID."""


class MagasiIDError(Exception):
    """Base exception for all MagasiID errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DuplicateIDError(MagasiIDError):
    """Raised when registering an ID that is already tracked (400)."""

    def __init__(self, id: str) -> None:
        super().__init__(f"ID {id} already registered", status_code=400)
        self.id = id


class InvalidConfigurationError(MagasiIDError):
    """Raised when an ID configuration is outside its domain (422)."""

    def __init__(self, message: str = "Invalid ID configuration") -> None:
        super().__init__(message, status_code=422)
