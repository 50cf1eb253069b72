from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import List, Optional


class APIException(HTTPException):
    def __init__(self, status_code: int, detail: str, errors: Optional[List[str]] = None):
        super().__init__(status_code=status_code, detail=detail)
        self.errors = list(errors or [])


class NotFoundError(APIException):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class ValidationFailedError(APIException):
    def __init__(self, detail: str, errors: Optional[List[str]] = None):
        super().__init__(status_code=400, detail=detail, errors=errors)


class LimitReachedError(APIException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail, errors=[detail])


def create_error_response(message: str, errors: Optional[List[str]] = None) -> dict:
    """Create a standardized error envelope"""
    return {
        "success": False,
        "message": message,
        "data": None,
        "errors": list(errors or []),
    }


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTPException as an envelope"""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(str(exc.detail), getattr(exc, "errors", None)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        errors.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return JSONResponse(
        status_code=400,
        content=create_error_response("Invalid request data", errors),
    )
