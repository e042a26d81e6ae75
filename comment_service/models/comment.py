from sqlalchemy import Column, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship

from comment_service.dependencies.mysql import Base
from comment_service.models.mixin import BaseMixin
from comment_service.models.user import User

COMMENT_STATUS_APPROVED = "approved"


class Comment(Base, BaseMixin):
    __tablename__ = "comment"
    __table_args__ = (Index("ix_comment_model", "model_type", "model_id"),)

    model_id = Column(String(255), nullable=False, comment="댓글 대상 ID")
    model_type = Column(
        String(100), nullable=False, comment="댓글 대상 종류(ex - post, blog)"
    )
    content = Column(Text, nullable=False, comment="댓글 내용")
    status = Column(
        String(20),
        nullable=False,
        default=COMMENT_STATUS_APPROVED,
        comment="댓글 상태. 항상 approved",
    )
    user_id = Column(
        String(36),
        ForeignKey("user.id"),
        nullable=False,
        comment="작성자 user.id",
        index=True,
    )

    # 작성자 정보는 응답마다 필요하므로 selectin으로 함께 조회
    user = relationship(
        User,
        primaryjoin="Comment.user_id == User.id",
        foreign_keys="Comment.user_id",
        lazy="selectin",
    )
