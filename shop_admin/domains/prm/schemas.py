# shop_admin/domains/prm/schemas.py

"""
'prm' 도메인 (프로모션 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime, UTC
from decimal import Decimal

from sqlmodel import SQLModel, Field
from pydantic import model_validator

from shop_admin.core.crud_base import PartialUpdate
from shop_admin.core.publishing import StagingState
from .models import PromotionType


def _as_utc(value: datetime) -> datetime:
    # SQLite 등에서 읽은 naive 값은 UTC로 간주합니다.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def check_promotion_rules(
    type_: Optional[PromotionType],
    value: Optional[Decimal],
    starts_at: Optional[datetime],
    ends_at: Optional[datetime],
) -> None:
    """정률 할인은 100 이하, 종료 일시는 시작 일시 이후여야 합니다."""
    if type_ == PromotionType.PERCENTAGE and value is not None and value > 100:
        raise ValueError("Percentage promotions cannot exceed 100")
    if starts_at is not None and ends_at is not None and _as_utc(ends_at) <= _as_utc(starts_at):
        raise ValueError("ends_at must be after starts_at")


class PromotionBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=100)
    code: str = Field(..., min_length=1, max_length=50)
    type: PromotionType = PromotionType.PERCENTAGE
    value: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    is_active: bool = True
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    allow_stacking: bool = False
    stacking_priority: int = 0
    max_uses: Optional[int] = Field(None, ge=0)
    max_uses_per_user: Optional[int] = Field(None, ge=0)


class PromotionCreate(PromotionBase):
    @model_validator(mode="after")
    def check_rules(self):
        check_promotion_rules(self.type, self.value, self.starts_at, self.ends_at)
        return self


class PromotionUpdate(PartialUpdate):
    """
    부분 수정 스키마. 여기서는 함께 전달된 필드끼리만 검증하며,
    기존 값과의 조합은 crud에서 다시 검증합니다.
    """
    NOT_NULL_FIELDS = ("name", "code", "type", "value", "is_active", "allow_stacking", "stacking_priority")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    code: Optional[str] = Field(None, min_length=1, max_length=50)
    type: Optional[PromotionType] = None
    value: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    is_active: Optional[bool] = None
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    allow_stacking: Optional[bool] = None
    stacking_priority: Optional[int] = None
    max_uses: Optional[int] = Field(None, ge=0)
    max_uses_per_user: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_rules(self):
        check_promotion_rules(self.type, self.value, self.starts_at, self.ends_at)
        return self


class PromotionProductionPatch(PartialUpdate):
    """운영 프로모션 직접 수정 (활성 여부, 최대 사용 횟수)"""
    NOT_NULL_FIELDS = ("is_active",)

    is_active: Optional[bool] = None
    max_uses: Optional[int] = Field(None, ge=0)


class PromotionRead(PromotionBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PromotionStagingRead(PromotionRead):
    state: StagingState
