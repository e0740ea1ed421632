# shop_admin/domains/tax/models.py

"""
'tax' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

세금 설정(tax_setting_staging, tax_settings)과 세금 규칙(tax_rule_staging, tax_rules)은
같은 필드(TaxRateBase)를 공유하지만 서로 독립적으로 편집되고 게시됩니다.
"""

from typing import Optional
from datetime import datetime, UTC
from decimal import Decimal

from sqlmodel import Field, SQLModel
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from shop_admin.core.publishing import StagingState


class TaxRateBase(SQLModel):
    """
    세율 한 건의 공통 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="고유 ID")
    description: Optional[str] = Field(default=None, max_length=255, description="설명 (예: GST 10%)")
    rate_percent: Decimal = Field(default=Decimal("0"), max_digits=5, decimal_places=2, description="세율 (%)")
    is_inclusive: bool = Field(default=False, description="가격에 세금 포함 여부")
    is_gst: bool = Field(default=False, description="GST 여부")

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


# =============================================================================
# 1. 세금 설정 (Tax Setting)
# =============================================================================
class TaxSettingStaging(TaxRateBase, table=True):
    __tablename__ = "tax_setting_staging"

    state: StagingState = Field(default=StagingState.ACTIVE, index=True, description="스테이징 상태")


class TaxSetting(TaxRateBase, table=True):
    __tablename__ = "tax_settings"


# =============================================================================
# 2. 세금 규칙 (Tax Rule)
# =============================================================================
class TaxRuleStaging(TaxRateBase, table=True):
    __tablename__ = "tax_rule_staging"

    state: StagingState = Field(default=StagingState.ACTIVE, index=True, description="스테이징 상태")


class TaxRule(TaxRateBase, table=True):
    __tablename__ = "tax_rules"
