# shop_admin/domains/cfg/schemas.py

from typing import Any, Dict, Optional
from datetime import datetime
from sqlmodel import SQLModel


class HeaderSettingSave(SQLModel):
    """저장할 설정 값. 기존 값에 최상위 키 단위로 병합됩니다."""
    settings: Optional[Dict[str, Any]] = None


class HeaderSettingRead(SQLModel):
    key: str
    settings: Dict[str, Any]
    updated_at: Optional[datetime] = None
