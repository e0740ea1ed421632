# shop_admin/domains/prd/schemas.py

"""
'prd' 도메인 (상품 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

import re
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from sqlmodel import SQLModel, Field
from pydantic import model_validator

from shop_admin.core.crud_base import PartialUpdate
from shop_admin.core.publishing import StagingState
from shop_admin.domains.cat.schemas import SLUG_PATTERN
from .models import ProductStatus


def slugify(name: str) -> str:
    """이름을 소문자-하이픈 slug로 변환합니다. 예: "T-Shirts & Tops" -> "t-shirts-tops" """
    slug = re.sub(r"[^a-z0-9\s-]", "", name.lower().strip())
    slug = re.sub(r"[\s-]+", "-", slug)
    return slug.strip("-")


# =============================================================================
# 1. 상품 유형 (ProductType) 스키마
# =============================================================================
class ProductTypeBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=100, regex=SLUG_PATTERN)
    description: Optional[str] = None
    category_slug: Optional[str] = Field(None, max_length=100)
    is_active: bool = True
    sort_order: int = 0


class ProductTypeCreate(ProductTypeBase):
    """slug를 생략하면 name에서 만들어집니다."""

    @model_validator(mode="after")
    def fill_slug(self):
        if self.slug is None:
            self.slug = slugify(self.name)
            if not self.slug:
                raise ValueError("slug cannot be derived from name; provide it explicitly")
        return self


class ProductTypeUpdate(PartialUpdate):
    NOT_NULL_FIELDS = ("name", "slug", "is_active", "sort_order")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=100, regex=SLUG_PATTERN)
    description: Optional[str] = None
    category_slug: Optional[str] = Field(None, max_length=100)
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class ProductTypeRead(ProductTypeBase):
    id: int
    slug: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductTypeStagingRead(ProductTypeRead):
    state: StagingState


# =============================================================================
# 2. 상품 (Product) 스키마
# =============================================================================
class ProductBase(SQLModel):
    product_code: str = Field(..., min_length=1, max_length=50)
    product_name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    product_type_slug: Optional[str] = Field(None, max_length=100)
    selling_price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    status: ProductStatus = ProductStatus.DRAFT
    category_slug: Optional[str] = Field(None, max_length=100)
    tags: List[str] = Field(default_factory=list)
    stock_level: int = Field(0, ge=0)
    reorder_point: int = Field(0, ge=0)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(PartialUpdate):
    NOT_NULL_FIELDS = ("product_code", "product_name", "selling_price", "status", "tags", "stock_level", "reorder_point")

    product_code: Optional[str] = Field(None, min_length=1, max_length=50)
    product_name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    product_type_slug: Optional[str] = Field(None, max_length=100)
    selling_price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    status: Optional[ProductStatus] = None
    category_slug: Optional[str] = Field(None, max_length=100)
    tags: Optional[List[str]] = None
    stock_level: Optional[int] = Field(None, ge=0)
    reorder_point: Optional[int] = Field(None, ge=0)


class ProductRead(ProductBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductStagingRead(ProductRead):
    state: StagingState
