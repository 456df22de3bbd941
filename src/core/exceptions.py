from typing import List, Optional

from src.core.response.schemas import ErrorDetail


class ServiceException(Exception):
    """Base error raised by the service layer."""

    def __init__(self, detail: str = "Service error"):
        super().__init__(detail)
        self.detail = detail


class ValidationException(ServiceException):
    def __init__(
        self,
        detail: str = "Validation error",
        error_details: Optional[List[ErrorDetail]] = None,
    ):
        super().__init__(detail)
        self.error_details = error_details or []

