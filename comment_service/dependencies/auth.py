import logging
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Header, HTTPException

from comment_service.config.config import settings

logger = logging.getLogger(__name__)


def create_access_token(user_id: str) -> str:
    """JWT 액세스 토큰을 생성합니다. sub에는 user.id가 들어갑니다."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt.expire_minutes),
    }
    return jwt.encode(
        payload, settings.jwt.secret_key, algorithm=settings.jwt.algorithm
    )


async def get_current_user_id(
    authorization: str | None = Header(default=None),
) -> str:
    """
    Authorization 헤더의 JWT 토큰을 검증하고 요청한 사용자의 id를 반환합니다.
    사용자 존재 여부는 각 서비스에서 확인합니다.
    """
    if authorization is None:
        raise HTTPException(status_code=401, detail="Unauthorized")

    try:
        scheme, token = authorization.split(" ", 1)
        if scheme.lower() != "bearer":
            raise HTTPException(status_code=401, detail="Invalid authentication scheme")
    except ValueError as e:
        raise HTTPException(
            status_code=401, detail="Invalid authorization header format"
        ) from e

    try:
        payload = jwt.decode(
            token,
            settings.jwt.secret_key,
            algorithms=[settings.jwt.algorithm],
        )
    except jwt.ExpiredSignatureError as e:
        raise HTTPException(status_code=401, detail="Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise HTTPException(status_code=401, detail="Invalid token") from e

    user_id: str | None = payload.get("sub")
    if user_id is None:
        raise HTTPException(status_code=401, detail="Invalid token payload")
    return user_id
