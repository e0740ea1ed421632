# shop_admin/domains/usr/models.py

"""
'usr' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

users 테이블과 사용자 역할(UserRole)을 포함합니다.
"""

from typing import Optional
from datetime import datetime, UTC
from enum import IntEnum

from sqlmodel import Field, SQLModel
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


class UserRole(IntEnum):
    """
    사용자 역할을 정의하는 정수형 Enum 클래스입니다.
    값이 작을수록 권한이 큽니다.
    """
    ADMIN = 10    # 게시, 스테이징 비우기, 사용자 관리
    EDITOR = 50   # 스테이징 편집
    USER = 100    # 운영 데이터 조회


class UserBase(SQLModel):
    """
    users 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="사용자 고유 ID")
    email: str = Field(max_length=100, unique=True, index=True, description="로그인 이메일")
    name: str = Field(max_length=100, description="사용자 이름")
    password_hash: str = Field(max_length=255, description="해싱된 비밀번호")
    role: UserRole = Field(default=UserRole.USER, description="사용자 역할 (권한)")
    is_active: bool = Field(default=True, description="계정 활성 여부")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_type=TIMESTAMP(timezone=True),
        sa_column_kwargs={"server_default": func.now()},
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_type=TIMESTAMP(timezone=True),
        sa_column_kwargs={"server_default": func.now(), "onupdate": func.now()},
        description="레코드 마지막 업데이트 일시"
    )


class User(UserBase, table=True):
    """
    users 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "users"
