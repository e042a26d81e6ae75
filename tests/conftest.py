import os
import tempfile
from typing import AsyncGenerator

import httpx
import pytest
from asgi_lifespan import LifespanManager
from sqlalchemy import text

# settings가 import 시점에 생성되므로 app import 전에 환경변수를 지정
_db_dir = tempfile.mkdtemp(prefix="comment_service_")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_db_dir}/test.db")
os.environ.setdefault("JWT__SECRET_KEY", "test-secret-key-for-comment-service-0123")

from comment_service.main import app  # noqa: E402


@pytest.fixture
async def test_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    async with (
        httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app),
            base_url="http://test",
        ) as async_client,
        LifespanManager(app),
    ):
        yield async_client


@pytest.fixture(scope="session")
async def init_db():
    """
    세션 단위로 테이블을 생성합니다.
    """
    from comment_service.dependencies.mysql import Base, _engine, shutdown, startup

    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await startup()
    yield
    await shutdown()


@pytest.fixture
async def api_client(init_db) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    테스트용 HTTP 클라이언트. 테스트 종료 후 모든 데이터를 삭제합니다.
    """
    from comment_service.dependencies.mysql import _async_session

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    async with _async_session() as session:
        for table in ["comment", "user"]:
            await session.execute(text(f'DELETE FROM "{table}"'))
        await session.commit()


async def _create_user(first_name: str, last_name: str, email: str) -> dict:
    """사용자를 DB에 직접 생성하고 {id, headers}를 반환합니다."""
    from comment_service.dependencies.auth import create_access_token
    from comment_service.dependencies.mysql import _async_session
    from comment_service.models.user import User

    async with _async_session() as session:
        user = User(first_name=first_name, last_name=last_name, email=email)
        session.add(user)
        await session.commit()
        await session.refresh(user)
        user_id = user.id

    token = create_access_token(user_id)
    return {"id": user_id, "headers": {"Authorization": f"Bearer {token}"}}


@pytest.fixture
async def member(api_client: httpx.AsyncClient) -> dict:
    return await _create_user("John", "Doe", "john.doe@example.com")


@pytest.fixture
async def member_headers(member: dict) -> dict:
    return member["headers"]


@pytest.fixture
async def other_member(api_client: httpx.AsyncClient) -> dict:
    return await _create_user("Jane", "Smith", "jane.smith@example.com")


@pytest.fixture
async def other_member_headers(other_member: dict) -> dict:
    return other_member["headers"]


@pytest.fixture
async def ghost_headers(api_client: httpx.AsyncClient) -> dict:
    """DB에 존재하지 않는 사용자의 토큰."""
    from comment_service.dependencies.auth import create_access_token

    token = create_access_token("00000000-0000-0000-0000-000000000000")
    return {"Authorization": f"Bearer {token}"}
