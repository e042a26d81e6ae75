from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse


def custom_exception_handler(_request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"status_code": exc.status_code, "message": exc.detail},
    )


def validation_exception_handler(_request: Request, exc: RequestValidationError):
    """요청 값 검증 실패는 422 대신 400으로 응답합니다."""
    return JSONResponse(
        status_code=400,
        content={
            "status_code": 400,
            "message": "Bad Request",
            "errors": jsonable_encoder(exc.errors()),
        },
    )
