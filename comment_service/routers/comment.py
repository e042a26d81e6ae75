import logging
from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from comment_service.config.config import settings
from comment_service.dependencies.auth import get_current_user_id
from comment_service.dependencies.mysql import get_session
from comment_service.services import comment as comment_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/comments", tags=["Comments"])


def _check_uuid(value: str) -> str:
    """UUID 형식만 검사하고 값은 보낸 그대로 저장합니다."""
    UUID(value)
    return value


class CreateCommentRequest(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_id: Annotated[str, AfterValidator(_check_uuid)] = Field(
        description="댓글 대상 ID(UUID)"
    )
    model_type: str = Field(min_length=1, examples=["post", "blog", "article"])
    content: str = Field(
        min_length=1, examples=["This is a comment made on an article"]
    )


class UpdateCommentRequest(BaseModel):
    content: str = Field(min_length=1)


class CommentUser(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str


class CommentSummary(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    id: str
    content: str
    model_id: str
    model_type: str
    created_at: datetime | None
    updated_at: datetime | None
    user: CommentUser


class CommentDetail(CommentSummary):
    status: str


class CreateCommentResponse(BaseModel):
    status: str
    message: str
    data: CommentSummary


class CommentListResponse(BaseModel):
    status_code: int
    message: str
    data: list[CommentSummary]


class CommentDetailResponse(BaseModel):
    status_code: int
    message: str
    data: CommentDetail


@router.post(
    "/add",
    response_model=CreateCommentResponse,
    status_code=201,
    summary="Add comment",
)
async def add_comment(
    body: CreateCommentRequest,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
) -> dict:
    return await comment_service.create_comment(
        session,
        user_id,
        model_id=body.model_id,
        model_type=body.model_type,
        content=body.content,
    )


@router.get("", response_model=CommentListResponse, summary="Get comments")
async def get_comments(
    model_type: str = Query(...),
    model_id: str = Query(...),
    page: int = Query(default=settings.pagination.default_page, ge=1),
    limit: int = Query(default=settings.pagination.default_limit, ge=1),
    _user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
) -> dict:
    return await comment_service.get_comments(
        session, model_type, model_id, page=page, limit=limit
    )


@router.get(
    "/{comment_id}",
    response_model=CommentDetailResponse,
    summary="Get comment by id",
)
async def get_comment(
    comment_id: str,
    _user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
) -> dict:
    return await comment_service.get_comment_by_id(session, comment_id)


@router.patch(
    "/{comment_id}",
    response_model=CommentDetailResponse,
    summary="Update comment",
)
async def update_comment(
    comment_id: str,
    body: UpdateCommentRequest,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
) -> dict:
    return await comment_service.update_comment(
        session, user_id, comment_id, content=body.content
    )
