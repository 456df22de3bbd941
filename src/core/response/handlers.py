from typing import Any, Dict, List, Optional

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.logger import get_logger
from src.core.response.schemas import ErrorDetail, ErrorResponse

logger = get_logger("response")


def error_response(
    error_code: str,
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: Optional[List[Dict[str, Any]]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=message,
        error_code=error_code,
        error_details=[ErrorDetail(**d) for d in details or []],
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        details.append(
            {
                "field": ".".join(loc),
                "code": str(err.get("type", "ERROR")).upper(),
                "message": err.get("msg", "Invalid value"),
            }
        )
    fields = ", ".join(d["field"] for d in details if d["field"])
    message = f"Invalid or missing fields: {fields}" if fields else "Invalid request"
    return error_response(
        error_code="VALIDATION_ERROR",
        message=message,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        details=details,
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        error_code="INTERNAL_ERROR",
        message="Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
