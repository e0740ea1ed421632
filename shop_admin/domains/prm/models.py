# shop_admin/domains/prm/models.py

"""
'prm' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

promotion_staging, promotions 두 테이블이 PromotionBase의 필드를 공유합니다.
운영 테이블에서 code는 고유해야 하며, 게시 중 중복이 발견되면 게시 전체가 롤백됩니다.
"""

from typing import Optional
from datetime import datetime, UTC
from decimal import Decimal
from enum import Enum

from sqlmodel import Field, SQLModel
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from shop_admin.core.publishing import StagingState


class PromotionType(str, Enum):
    PERCENTAGE = "PERCENTAGE"      # 정률 할인 (value는 0~100)
    FIXED_AMOUNT = "FIXED_AMOUNT"  # 정액 할인


class PromotionBase(SQLModel):
    """
    프로모션의 공통 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="프로모션 고유 ID")
    name: str = Field(max_length=100, description="프로모션명")
    code: str = Field(max_length=50, index=True, description="프로모션 코드 (자연 키)")
    type: PromotionType = Field(default=PromotionType.PERCENTAGE, description="할인 유형")
    value: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2, description="할인 값")
    is_active: bool = Field(default=True, description="활성 여부")
    starts_at: Optional[datetime] = Field(default=None, sa_type=TIMESTAMP(timezone=True), description="시작 일시")
    ends_at: Optional[datetime] = Field(default=None, sa_type=TIMESTAMP(timezone=True), description="종료 일시")
    allow_stacking: bool = Field(default=False, description="다른 프로모션과 중복 적용 허용")
    stacking_priority: int = Field(default=0, description="중복 적용 시 우선순위")
    max_uses: Optional[int] = Field(default=None, description="전체 최대 사용 횟수")
    max_uses_per_user: Optional[int] = Field(default=None, description="사용자별 최대 사용 횟수")

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


class PromotionStaging(PromotionBase, table=True):
    __tablename__ = "promotion_staging"

    state: StagingState = Field(default=StagingState.ACTIVE, index=True, description="스테이징 상태")


class Promotion(PromotionBase, table=True):
    __tablename__ = "promotions"

    code: str = Field(max_length=50, unique=True, index=True, description="프로모션 코드 (운영에서 고유)")
