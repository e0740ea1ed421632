# shop_admin/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 함수 및 의존성 주입을 정의하는 모듈입니다.

- 비밀번호 해싱 및 검증.
- JWT(JSON Web Token) 생성 및 검증.
- OAuth2 Password Bearer 스키마를 사용하여 현재 사용자 획득.
- 사용자 역할(role) 기반 권한 부여(Authorization) 검사.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext  # 비밀번호 해싱을 위한 라이브러리
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin import API_PREFIX
from shop_admin.core.config import settings
from shop_admin.core.database import get_session
from shop_admin.domains.usr import models as usr_models

logger = logging.getLogger(__name__)

# --- 비밀번호 해싱 설정 ---
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    일반 텍스트 비밀번호와 해싱된 비밀번호를 비교하여 일치하는지 확인합니다.
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    주어진 비밀번호를 해싱합니다.
    """
    return pwd_context.hash(password)


# --- OAuth2 스키마 설정 ---
# Swagger UI가 올바른 토큰 발급 경로를 찾도록 API_PREFIX를 사용합니다.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{API_PREFIX}/usr/auth/token")


# --- JWT 토큰 생성 및 검증 ---
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Access Token을 생성합니다.
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)
    logger.debug("Access token created, expires at: %s", expire)
    return encoded_jwt


async def get_current_user_from_token(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_session),
) -> usr_models.User:
    """
    JWT 토큰을 디코딩하고 검증하여 현재 사용자를 데이터베이스에서 가져옵니다.
    토큰의 sub 클레임에는 사용자 이메일이 들어 있습니다.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.SECRET_KEY.get_secret_value(), algorithms=[settings.ALGORITHM])
        email: Optional[str] = payload.get("sub")
        if email is None:
            raise credentials_exception
    except JWTError as e:
        logger.debug("JWTError: %s", e)
        raise credentials_exception

    statement = select(usr_models.User).where(usr_models.User.email == email)
    result = await db.execute(statement)
    user = result.scalars().one_or_none()
    if user is None:
        raise credentials_exception
    return user


# --- 역할 기반 권한 부여 의존성 ---

def get_current_active_user(
    current_user: usr_models.User = Depends(get_current_user_from_token),
) -> usr_models.User:
    """
    현재 인증된 활성 사용자를 반환합니다.
    계정이 비활성화된 경우 400 Bad Request를 발생시킵니다.
    """
    if not current_user.is_active:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Inactive user")
    return current_user


def get_current_editor_user(
    current_user: usr_models.User = Depends(get_current_active_user),
) -> usr_models.User:
    """
    스테이징 데이터를 편집할 수 있는 사용자(EDITOR 이상)를 반환합니다.
    권한이 없는 경우 403 Forbidden을 발생시킵니다.
    """
    if current_user.role > usr_models.UserRole.EDITOR:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions. Editor role required."
        )
    return current_user


def get_current_admin_user(
    current_user: usr_models.User = Depends(get_current_active_user),
) -> usr_models.User:
    """
    현재 인증된 관리자 사용자를 반환합니다.
    관리자 권한이 없는 경우 403 Forbidden을 발생시킵니다.
    """
    if current_user.role != usr_models.UserRole.ADMIN:
        logger.debug("Role '%s' is not allowed for admin endpoints.", current_user.role.name)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions. Admin role required."
        )
    return current_user
