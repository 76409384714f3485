from typing import Any


class CoreException(Exception):
    def __init__(
        self, message: str | None = None, additional_info: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        self.additional_info = additional_info


class InvalidInputException(CoreException):
    """Raised when a value handed to the pagination helpers has an unsupported type."""
