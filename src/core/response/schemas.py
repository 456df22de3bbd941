from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    field: str = ""
    code: str = Field(default="ERROR")
    message: str = Field(default="Unknown Error")
    target: Optional[str] = Field(default=None)


class ErrorResponse(BaseModel):
    success: bool = Field(default=False)
    error: str = Field(default="Unknown Error")
    error_code: str = Field(default="ERROR")
    error_details: List[ErrorDetail] = Field(default=[])
    data: Optional[Any] = None
