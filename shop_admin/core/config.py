# shop_admin/core/config.py

from typing import List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일
        env_file_encoding='utf-8',
        extra='ignore',                      # 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Shop Admin API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Shop administration API with staging -> production publishing"
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable debug mode (SQL echo)")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Database connection URL (postgresql+asyncpg://...)")

    # --- JWT (JSON Web Token) 설정 ---
    SECRET_KEY: SecretStr = Field(..., description="Secret key for JWT token signing. Keep this highly secure!")
    ALGORITHM: str = Field("HS256", description="Algorithm used for JWT signing (e.g., HS256)")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(30, description="Access token expiration time in minutes")

    # --- 게시(publish) 설정 ---
    # 스테이징이 비어 있을 때의 처리 방식. 모든 리소스 종류에 동일하게 적용됩니다.
    #   reject: 400 응답으로 게시를 거부 (운영 데이터 유지)
    #   clear : 운영 데이터를 모두 비움
    PUBLISH_EMPTY_STAGING_POLICY: str = Field(
        "reject",
        pattern="^(reject|clear)$",
        description="Policy applied when publishing an empty staging set",
    )

    # --- ARQ (백그라운드 워커) 설정 ---
    ARQ_ENABLED: bool = Field(True, description="Open an ARQ redis pool on startup")
    REDIS_HOST: str = Field("localhost", description="Redis host for the ARQ worker")
    REDIS_PORT: int = Field(6379, description="Redis port for the ARQ worker")

    # --- CORS 설정 ---
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")


settings = Settings()
