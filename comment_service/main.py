import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from comment_service.dependencies import mysql
from comment_service.exception_handler import (
    custom_exception_handler,
    validation_exception_handler,
)
from comment_service.routers import comment

# 모든 모델을 import하여 Base.metadata에 등록
import comment_service.models.comment  # noqa: F401
import comment_service.models.user  # noqa: F401

# logger 전역 설정
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    await mysql.startup()

    yield

    await mysql.shutdown()


app = FastAPI(title="Comment Service", lifespan=lifespan)
app.add_exception_handler(HTTPException, custom_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(comment.router)


@app.get(
    "/health",
    tags=["Health Check"],
    summary="Health Check용 API",
)
async def health_check() -> str:
    return "ok"
