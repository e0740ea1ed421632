# tests/conftest.py

import os
from typing import AsyncGenerator, Callable, Awaitable
from contextlib import asynccontextmanager

# 설정 객체가 임포트 시점에 생성되므로, 앱 모듈을 임포트하기 전에 테스트용 환경 변수를 지정합니다.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-shop-admin")
os.environ.setdefault("ARQ_ENABLED", "false")
os.environ.setdefault("PUBLISH_EMPTY_STAGING_POLICY", "reject")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.main import app as main_app
from shop_admin.core import dependencies as deps
from shop_admin.core.database import get_session
from shop_admin.core.security import get_password_hash

# --- 모든 모델 임포트 ---
# SQLModel.metadata.create_all()이 모든 테이블을 인식하도록 모든 모델을 한 번 임포트합니다.
from shop_admin.domains.models import *  # noqa: F401, F403
from shop_admin.domains.usr import models as usr_models


# --- 테스트용 데이터베이스 설정 ---
# 테스트마다 새 인메모리 SQLite 데이터베이스를 사용하므로 테스트 간 데이터가 공유되지 않습니다.
# StaticPool은 하나의 연결을 재사용하여 인메모리 DB가 세션 사이에서 유지되도록 합니다.
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    테스트 함수마다 새 데이터베이스에 연결된 비동기 세션을 제공합니다.
    API 요청과 테스트 코드가 같은 세션을 공유합니다.
    """
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session


# --- 역할별 사용자 픽스처 ---
@pytest_asyncio.fixture(scope="function")
def user_factory(db_session: AsyncSession) -> Callable[..., Awaitable[usr_models.User]]:
    """
    역할과 속성을 지정하여 테스트 사용자를 생성하는 팩토리 함수를 반환합니다.
    """
    async def _create_user(
        email: str,
        password: str,
        role: usr_models.UserRole,
        is_active: bool = True,
        **kwargs,
    ) -> usr_models.User:
        user_data = {
            "email": email,
            "name": email.split("@")[0],
            "password_hash": get_password_hash(password),
            "role": role,
            "is_active": is_active,
            **kwargs,
        }
        user = usr_models.User(**user_data)
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user
    return _create_user


@pytest_asyncio.fixture(scope="function")
async def test_admin_user(user_factory: Callable) -> usr_models.User:
    """관리자(ADMIN) 사용자를 생성합니다."""
    return await user_factory("admin@example.com", "adminpass123", role=usr_models.UserRole.ADMIN)


@pytest_asyncio.fixture(scope="function")
async def test_editor_user(user_factory: Callable) -> usr_models.User:
    """편집자(EDITOR) 사용자를 생성합니다."""
    return await user_factory("editor@example.com", "editorpass123", role=usr_models.UserRole.EDITOR)


@pytest_asyncio.fixture(scope="function")
async def test_user(user_factory: Callable) -> usr_models.User:
    """일반 사용자(USER)를 생성합니다."""
    return await user_factory("user@example.com", "userpass123", role=usr_models.UserRole.USER)


# --- 역할별 인증 클라이언트 픽스처 ---
# 세션 의존성만 테스트 세션으로 바꾸고, 인증은 실제 /auth/token 로그인으로 발급한 JWT를 사용합니다.
# 따라서 역할별 권한 검사(get_current_editor_user, get_current_admin_user)가 그대로 실행됩니다.
@pytest_asyncio.fixture(scope="function")
def authorized_client_factory(
    db_session: AsyncSession,
) -> Callable[[usr_models.User, str], AsyncGenerator[AsyncClient, None]]:
    """
    특정 사용자로 로그인된 AsyncClient를 생성하는 팩토리 함수를 반환합니다.
    """
    @asynccontextmanager
    async def _create_client_context(user: usr_models.User, password: str) -> AsyncGenerator[AsyncClient, None]:
        def override_get_session():
            yield db_session

        original_overrides = main_app.dependency_overrides.copy()
        email = user.email

        try:
            main_app.dependency_overrides.update({
                get_session: override_get_session,
                deps.get_db_session: override_get_session,
            })

            transport = ASGITransport(app=main_app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                login_data = {"username": email, "password": password}
                res = await client.post("/api/v1/usr/auth/token", data=login_data)

                if res.status_code != 200:
                    pytest.fail(f"Login failed for {email}: {res.text}")

                token = res.json()["access_token"]
                client.headers["Authorization"] = f"Bearer {token}"
                yield client

        finally:
            main_app.dependency_overrides.clear()
            main_app.dependency_overrides.update(original_overrides)

    return _create_client_context


@pytest_asyncio.fixture(scope="function")
async def admin_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_admin_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """관리자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_admin_user, "adminpass123") as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def editor_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_editor_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """편집자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_editor_user, "editorpass123") as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def authorized_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """일반 사용자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_user, "userpass123") as client:
        yield client


# --- 비인증 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    인증되지 않은 사용자를 위한 AsyncClient 인스턴스를 생성하고,
    테스트용 비동기 DB 세션을 주입합니다.
    """
    def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides[get_session] = override_get_session
        main_app.dependency_overrides[deps.get_db_session] = override_get_session

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)
