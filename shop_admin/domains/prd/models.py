# shop_admin/domains/prd/models.py

"""
'prd' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

- product_type_staging, product_types: 상품 유형 (ProductTypeBase 공유, slug 고유)
- product_staging, products: 상품 (ProductBase 공유, product_code 고유)

운영 ID는 게시 때마다 새로 발급되므로 상품은 category_slug, product_type_slug로
카테고리와 상품 유형을 참조합니다.
"""

from typing import List, Optional
from datetime import datetime, UTC
from decimal import Decimal
from enum import Enum

from sqlmodel import Field, SQLModel
from sqlalchemy import JSON
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from shop_admin.core.publishing import StagingState


class ProductStatus(str, Enum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"


class ProductTypeBase(SQLModel):
    """
    상품 유형의 공통 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="상품 유형 고유 ID")
    name: str = Field(max_length=100, description="상품 유형명")
    slug: str = Field(max_length=100, index=True, description="URL 식별자 (자연 키)")
    description: Optional[str] = Field(default=None, description="설명")
    category_slug: Optional[str] = Field(default=None, max_length=100, index=True, description="소속 카테고리 slug")
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


class ProductTypeStaging(ProductTypeBase, table=True):
    __tablename__ = "product_type_staging"

    state: StagingState = Field(default=StagingState.ACTIVE, index=True, description="스테이징 상태")


class ProductType(ProductTypeBase, table=True):
    __tablename__ = "product_types"

    slug: str = Field(max_length=100, unique=True, index=True, description="URL 식별자 (운영에서 고유)")


class ProductBase(SQLModel):
    """
    상품의 공통 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="상품 고유 ID")
    product_code: str = Field(max_length=50, index=True, description="상품 코드 (자연 키)")
    product_name: str = Field(max_length=200, description="상품명")
    description: Optional[str] = Field(default=None, description="상품 설명")
    product_type_slug: Optional[str] = Field(default=None, max_length=100, index=True, description="상품 유형 slug")
    selling_price: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2, description="판매가")
    status: ProductStatus = Field(default=ProductStatus.DRAFT, description="판매 상태")
    category_slug: Optional[str] = Field(default=None, max_length=100, index=True, description="카테고리 slug")
    tags: List[str] = Field(default_factory=list, sa_type=JSON, description="태그 목록 (JSON)")
    stock_level: int = Field(default=0, description="재고 수량")
    reorder_point: int = Field(default=0, description="재주문 기준 수량")

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


class ProductStaging(ProductBase, table=True):
    __tablename__ = "product_staging"

    state: StagingState = Field(default=StagingState.ACTIVE, index=True, description="스테이징 상태")


class Product(ProductBase, table=True):
    __tablename__ = "products"

    product_code: str = Field(max_length=50, unique=True, index=True, description="상품 코드 (운영에서 고유)")
