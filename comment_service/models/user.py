from sqlalchemy import Column, String

from comment_service.dependencies.mysql import Base
from comment_service.models.mixin import BaseMixin


class User(Base, BaseMixin):
    __tablename__ = "user"

    first_name = Column(String(50), nullable=False, comment="이름")
    last_name = Column(String(50), nullable=False, comment="성")
    email = Column(String(100), index=True, nullable=False, comment="이메일")
