# shop_admin/domains/tax/schemas.py

"""
'tax' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
세금 설정과 세금 규칙은 같은 스키마를 사용합니다.
"""

from typing import Optional
from datetime import datetime
from decimal import Decimal
from sqlmodel import SQLModel, Field

from shop_admin.core.crud_base import PartialUpdate
from shop_admin.core.publishing import StagingState


class TaxRateBase(SQLModel):
    description: Optional[str] = Field(None, max_length=255)
    rate_percent: Decimal = Field(..., ge=0, le=100, max_digits=5, decimal_places=2)
    is_inclusive: bool = False
    is_gst: bool = False


class TaxRateCreate(TaxRateBase):
    pass


class TaxRateUpdate(PartialUpdate):
    NOT_NULL_FIELDS = ("rate_percent", "is_inclusive", "is_gst")

    description: Optional[str] = Field(None, max_length=255)
    rate_percent: Optional[Decimal] = Field(None, ge=0, le=100, max_digits=5, decimal_places=2)
    is_inclusive: Optional[bool] = None
    is_gst: Optional[bool] = None


class TaxRateRead(TaxRateBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TaxRateStagingRead(TaxRateRead):
    state: StagingState
