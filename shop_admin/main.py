# shop_admin/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from arq.connections import create_pool, RedisSettings

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

# 핵심 설정 및 데이터베이스 모듈 임포트
from shop_admin.core.config import settings
from shop_admin.core.database import engine, get_session
from shop_admin.core.responses import ApiException, api_exception_handler

from shop_admin import API_PREFIX

# 태스크 모듈 임포트
from shop_admin.core import tasks as core_tasks

# 도메인 라우터 임포트
from shop_admin.domains.usr.routers import router as usr_router
from shop_admin.domains.cat.routers import router as cat_router
from shop_admin.domains.ven.routers import router as ven_router
from shop_admin.domains.prm.routers import router as prm_router
from shop_admin.domains.tax.routers import router as tax_router
from shop_admin.domains.prd.routers import router as prd_router
from shop_admin.domains.cfg.routers import router as cfg_router

# -- 로깅 설정 --
# 애플리케이션 전체 로깅은 여기서 한 번만 구성하며, 각 모듈은 logging.getLogger(__name__)을 사용합니다.
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# ARQ 워커가 실행할 태스크 함수 목록
worker_functions = [
    core_tasks.health_check_database_task,
]


# ARQ 워커 설정 클래스 (arq shop_admin.main.ArqWorkerSettings 로 실행)
class ArqWorkerSettings:
    redis_settings = RedisSettings(host=settings.REDIS_HOST, port=settings.REDIS_PORT)
    functions = worker_functions
    jobs = [
        {
            'name': 'daily_db_health_check',
            'function': 'shop_admin.core.tasks.health_check_database_task',
            'cron': '0 0 * * *',
            'timeout': 300,
            'keep_result': 600,
        },
    ]


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기 이벤트(데이터베이스, ARQ Redis)를 함께 처리합니다.
    """
    logger.info("FastAPI 애플리케이션 시작 중...")
    app.state.redis = None
    if settings.ARQ_ENABLED:
        logger.info("ARQ Redis 커넥션 풀을 생성합니다...")
        app.state.redis = await create_pool(ArqWorkerSettings.redis_settings)
        logger.info("ARQ Redis 커넥션 풀 생성 완료.")

    yield  # 애플리케이션 실행

    logger.info("FastAPI 애플리케이션 종료 중...")
    if app.state.redis is not None:
        await app.state.redis.close()
        logger.info("ARQ Redis 연결 풀 종료 완료.")
    await engine.dispose()
    logger.info("데이터베이스 연결 풀 종료 완료.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",       # Swagger UI
    redoc_url="/redoc",     # ReDoc
    lifespan=lifespan
)

# 공통 응답 봉투 형식의 예외 처리기
app.add_exception_handler(ApiException, api_exception_handler)

# -- CORS 미들웨어 설정 --
# 운영 환경에서는 CORS_ORIGINS를 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 도메인 라우터 포함 --
app.include_router(usr_router, prefix=f"{API_PREFIX}/usr")
app.include_router(cat_router, prefix=f"{API_PREFIX}/cat")
app.include_router(ven_router, prefix=f"{API_PREFIX}/ven")
app.include_router(prm_router, prefix=f"{API_PREFIX}/prm")
app.include_router(tax_router, prefix=f"{API_PREFIX}/tax")
app.include_router(prd_router, prefix=f"{API_PREFIX}/prd")
app.include_router(cfg_router, prefix=f"{API_PREFIX}/cfg")


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    Shop Admin API의 루트 엔드포인트입니다.
    API의 시작점을 알리고 문서 링크를 제공합니다.
    """
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    애플리케이션의 헬스 체크 엔드포인트입니다.
    데이터베이스 연결을 테스트하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.execute(select(1))
        ok = result.scalar_one_or_none() == 1
    except Exception:
        logger.exception("Database health check failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database connection error during health check"
        )
    if not ok:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database health check failed: No result from test query"
        )
    return {"status": "ok", "database_connection": "successful"}
