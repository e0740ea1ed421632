# shop_admin/domains/cfg/models.py

"""
'cfg' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Any, Dict, Optional
from datetime import datetime, UTC

from sqlmodel import Field, SQLModel
from sqlalchemy import JSON
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


class HeaderSetting(SQLModel, table=True):
    """
    사이트 헤더 설정을 키 단위로 저장하는 테이블입니다 (예: key="header-main").
    settings는 화면 구성 값을 담은 JSON 객체입니다.
    """
    __tablename__ = "header_settings"

    id: Optional[int] = Field(default=None, primary_key=True, description="고유 ID")
    key: str = Field(max_length=50, unique=True, index=True, description="설정 키")
    settings: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON, description="설정 값 (JSON)")

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
