"""
댓글 조회/작성/수정 로직.

router에서는 요청 값과 인증된 사용자 id만 넘기고, 검증/권한 확인/DB 작업은 모두 여기서 수행합니다.
"""

import logging

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from comment_service.models.comment import COMMENT_STATUS_APPROVED, Comment
from comment_service.models.user import User

logger = logging.getLogger(__name__)


def _user_summary(user: User) -> dict:
    return {
        "id": user.id,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "email": user.email,
    }


def _comment_summary(comment: Comment, user: User) -> dict:
    return {
        "id": comment.id,
        "content": comment.content,
        "model_id": comment.model_id,
        "model_type": comment.model_type,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
        "user": _user_summary(user),
    }


def _comment_detail(comment: Comment) -> dict:
    detail = _comment_summary(comment, comment.user)
    detail["status"] = comment.status
    return detail


async def _get_user(user_id: str, session: AsyncSession) -> User:
    user = await session.scalar(select(User).where(User.id == user_id))
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


async def _get_comment(comment_id: str, session: AsyncSession) -> Comment:
    comment = await session.scalar(
        select(Comment)
        .where(Comment.id == comment_id)
        .execution_options(populate_existing=True)
    )
    if comment is None:
        raise HTTPException(status_code=404, detail="Comment not found")
    return comment


async def create_comment(
    session: AsyncSession,
    user_id: str,
    model_id: str,
    model_type: str,
    content: str,
) -> dict:
    if not content or not content.strip():
        raise HTTPException(status_code=400, detail="Comment cannot be empty")

    user = await _get_user(user_id, session)

    comment = Comment(
        model_id=model_id,
        model_type=model_type,
        content=content,
        status=COMMENT_STATUS_APPROVED,
        user_id=user.id,
    )
    try:
        session.add(comment)
        await session.commit()
        await session.refresh(comment)
    except SQLAlchemyError as e:
        await session.rollback()
        logger.exception("failed to create comment for user %s", user.id)
        raise HTTPException(status_code=500, detail="Internal server error") from e
    logger.info("comment %s created by user %s", comment.id, user.id)

    return {
        "status": "success",
        "message": "Created comment successfully",
        "data": _comment_summary(comment, user),
    }


async def get_comments(
    session: AsyncSession,
    model_type: str,
    model_id: str,
    page: int = 1,
    limit: int = 10,
) -> dict:
    """
    model_type, model_id가 정확히 일치하는 댓글을 offset 방식으로 조회합니다.
    정렬 조건이 없으므로 순서는 DB가 반환하는 순서를 따릅니다.
    """
    stmt = (
        select(Comment)
        .where(Comment.model_type == model_type, Comment.model_id == model_id)
        .offset((page - 1) * limit)
        .limit(limit)
    )
    try:
        result = await session.scalars(stmt)
        comments = list(result.all())
    except SQLAlchemyError as e:
        logger.exception("failed to fetch comments for %s:%s", model_type, model_id)
        raise HTTPException(
            status_code=500, detail="An error occurred while fetching comments"
        ) from e

    # 작성자 row가 없는 댓글은 응답을 만들 수 없음
    orphans = [c.id for c in comments if c.user is None]
    if orphans:
        logger.error("comments without owner: %s", orphans)
        raise HTTPException(
            status_code=500, detail="An error occurred while fetching comments"
        )

    return {
        "status_code": 200,
        "message": "Comments fetched successfully",
        "data": [_comment_summary(c, c.user) for c in comments],
    }


async def get_comment_by_id(session: AsyncSession, comment_id: str) -> dict:
    comment = await _get_comment(comment_id, session)
    return {
        "status_code": 200,
        "message": "Comment fetched successfully",
        "data": _comment_detail(comment),
    }


async def update_comment(
    session: AsyncSession,
    user_id: str,
    comment_id: str,
    content: str,
) -> dict:
    user = await _get_user(user_id, session)
    comment = await _get_comment(comment_id, session)
    if comment.user_id != user.id:
        raise HTTPException(
            status_code=403,
            detail="You do not have permission to update this comment",
        )

    try:
        comment.content = content
        await session.commit()
        comment = await _get_comment(comment_id, session)
    except HTTPException:
        raise
    except SQLAlchemyError as e:
        await session.rollback()
        logger.exception("failed to update comment %s", comment_id)
        raise HTTPException(status_code=500, detail="Internal server error") from e

    logger.info("comment %s updated by user %s", comment.id, user.id)
    return {
        "status_code": 200,
        "message": "Comment updated successfully",
        "data": _comment_detail(comment),
    }
