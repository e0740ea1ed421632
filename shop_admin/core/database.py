# shop_admin/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 요청 단위 비동기 세션 의존성과 태스크용 세션 컨텍스트를 제공합니다.
- 개발 환경에서 테이블을 생성하는 함수를 포함합니다 (운영은 Alembic 사용).
"""

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.core.config import settings

# =============================================================================
# 모든 도메인 모델 임포트
# =============================================================================
# 모든 SQLModel 클래스가 SQLModel.metadata에 등록되도록 명시적으로 임포트합니다.
from shop_admin.domains import models  # noqa: F401

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    """
    드라이버별 엔진 옵션을 반환합니다.
    SQLite(로컬 개발/테스트)는 풀 크기 옵션을 받지 않습니다.
    """
    options = {"echo": settings.DEBUG_MODE, "future": True}
    if not url.startswith("sqlite"):
        options.update(
            pool_recycle=3600,  # 1시간마다 연결 재활용
            pool_size=10,       # 최소 10개의 연결 유지
            max_overflow=20,    # 최대 20개의 추가 연결 허용 (총 30개)
        )
    return options


_database_url = settings.DATABASE_URL.get_secret_value()  # SecretStr 값에 접근

engine: AsyncEngine = create_async_engine(_database_url, **_engine_options(_database_url))

# 비동기 세션을 생성하는 '세션 공장'을 정의합니다.
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

metadata = SQLModel.metadata


# =============================================================================
# 데이터베이스 초기화 및 테이블 생성 함수
# =============================================================================
async def create_db_and_tables() -> None:
    """
    SQLModel.metadata에 등록된 모든 테이블을 생성합니다.
    개발 환경 전용이며, 기존 테이블을 삭제하지는 않습니다.
    """
    logger.info("데이터베이스 테이블 생성을 시도합니다...")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("데이터베이스 테이블 생성 완료 (또는 이미 존재).")


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    ARQ Task 등 요청 밖의 비동기 컨텍스트에서 사용할 독립적인 세션을 제공합니다.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
