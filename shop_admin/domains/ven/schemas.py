# shop_admin/domains/ven/schemas.py

"""
'ven' 도메인 (공급업체 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field
from pydantic import EmailStr

from shop_admin.core.crud_base import PartialUpdate
from shop_admin.core.publishing import StagingState


class SupplierBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=100)
    code: str = Field(..., min_length=1, max_length=50)
    email: Optional[EmailStr] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = None
    is_active: bool = True


class SupplierCreate(SupplierBase):
    pass


class SupplierUpdate(PartialUpdate):
    NOT_NULL_FIELDS = ("name", "code", "is_active")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    code: Optional[str] = Field(None, min_length=1, max_length=50)
    email: Optional[EmailStr] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = None
    is_active: Optional[bool] = None


class SupplierRead(SupplierBase):
    id: int
    # 운영 데이터는 검증 없이 그대로 반환합니다.
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SupplierStagingRead(SupplierRead):
    state: StagingState
