from uuid import uuid4

from sqlalchemy import Column, DateTime, String, func


class BaseMixin:
    """
    모든 모델(테이블)의 공통 컬럼을 정의
    """

    id = Column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        nullable=False,
        comment="UUID 문자열",
    )
    created_at = Column(DateTime, server_default=func.now(), index=True)
    updated_at = Column(
        DateTime, server_default=func.now(), onupdate=func.now(), index=True
    )
