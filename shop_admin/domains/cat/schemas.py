# shop_admin/domains/cat/schemas.py

"""
'cat' 도메인 (카테고리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field

from shop_admin.core.crud_base import PartialUpdate
from shop_admin.core.publishing import StagingState

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class CategoryBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., max_length=100, regex=SLUG_PATTERN, description="소문자, 숫자, 하이픈")
    description: Optional[str] = None
    parent_slug: Optional[str] = Field(None, max_length=100)
    is_active: bool = True
    sort_order: int = 0


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(PartialUpdate):
    NOT_NULL_FIELDS = ("name", "slug", "is_active", "sort_order")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=100, regex=SLUG_PATTERN)
    description: Optional[str] = None
    parent_slug: Optional[str] = Field(None, max_length=100)
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class CategoryRead(CategoryBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CategoryStagingRead(CategoryRead):
    state: StagingState
