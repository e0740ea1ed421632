# shop_admin/domains/ven/models.py

"""
'ven' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

supplier_staging, suppliers 두 테이블이 SupplierBase의 필드를 공유합니다.
"""

from typing import Optional
from datetime import datetime, UTC

from sqlmodel import Field, SQLModel
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP

from shop_admin.core.publishing import StagingState


class SupplierBase(SQLModel):
    """
    공급업체의 공통 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="공급업체 고유 ID")
    name: str = Field(max_length=100, description="공급업체명")
    code: str = Field(max_length=50, index=True, description="공급업체 코드 (자연 키)")
    email: Optional[str] = Field(default=None, max_length=100, description="대표 이메일")
    phone: Optional[str] = Field(default=None, max_length=50, description="대표 전화번호")
    notes: Optional[str] = Field(default=None, description="비고")
    is_active: bool = Field(default=True, description="거래 여부")

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


class SupplierStaging(SupplierBase, table=True):
    __tablename__ = "supplier_staging"

    state: StagingState = Field(default=StagingState.ACTIVE, index=True, description="스테이징 상태")


class Supplier(SupplierBase, table=True):
    __tablename__ = "suppliers"

    code: str = Field(max_length=50, unique=True, index=True, description="공급업체 코드 (운영에서 고유)")
