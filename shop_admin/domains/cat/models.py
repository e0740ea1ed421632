# shop_admin/domains/cat/models.py

"""
'cat' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

- category_staging: 편집 중인 카테고리 (활성/삭제 예정 상태)
- categories: 게시된 운영 카테고리 (slug 고유)

두 테이블은 CategoryBase의 필드를 공유하며, 게시 시 이 필드들이 그대로 복사됩니다.
"""

from typing import Optional
from datetime import datetime, UTC

from sqlmodel import Field, SQLModel
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from shop_admin.core.publishing import StagingState


class CategoryBase(SQLModel):
    """
    카테고리의 공통 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="카테고리 고유 ID")
    name: str = Field(max_length=100, description="카테고리명")
    slug: str = Field(max_length=100, index=True, description="URL 식별자 (자연 키)")
    description: Optional[str] = Field(default=None, description="설명")
    parent_slug: Optional[str] = Field(default=None, max_length=100, description="상위 카테고리 slug")
    is_active: bool = Field(default=True, description="노출 여부")
    sort_order: int = Field(default=0, description="정렬 순서")

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


class CategoryStaging(CategoryBase, table=True):
    __tablename__ = "category_staging"

    state: StagingState = Field(default=StagingState.ACTIVE, index=True, description="스테이징 상태")


class Category(CategoryBase, table=True):
    __tablename__ = "categories"

    slug: str = Field(max_length=100, unique=True, index=True, description="URL 식별자 (운영에서 고유)")
