# shop_admin/domains/cfg/crud.py

"""
'cfg' 도메인의 CRUD 작업을 담당하는 모듈입니다.

설정 행은 처음 조회할 때 기본값으로 생성되며,
저장은 최상위 키 단위 병합, 재설정은 기본값으로 덮어쓰기입니다.
"""

import copy
import logging
from typing import Any, Dict

from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.core.crud_base import CRUDBase
from . import models as cfg_models
from . import schemas as cfg_schemas

logger = logging.getLogger(__name__)

HEADER_MAIN_KEY = "header-main"

_BREAKPOINT_DEFAULTS = {
    "height": 64,
    "paddingHorizontal": 16,
    "logoWidth": 40,
    "logoHeight": 40,
    "quickButtonSize": 40,
    "menuButtonSize": 40,
}

DEFAULT_HEADER_SETTINGS: Dict[str, Any] = {
    "desktop": dict(_BREAKPOINT_DEFAULTS),
    "tablet": dict(_BREAKPOINT_DEFAULTS),
    "mobile": dict(_BREAKPOINT_DEFAULTS),
    "backgroundColor": "#ffffff",
    "dropShadow": "medium",
    "quickButtonBgColor": "#f3f4f6",
    "quickButtonIconColor": "#6b7280",
    "quickButtonHoverBgColor": "#e5e7eb",
    "quickButtonHoverIconColor": "#374151",
    "quickButtonShape": "rounded",
    "quickButtonShadow": "light",
    "quickButtonGap": "8px",
    "menuButtonBgColor": "var(--color-neutral-200)",
    "menuButtonIconColor": "var(--color-neutral-700)",
    "menuButtonHoverBgColor": "var(--color-neutral-300)",
    "menuButtonHoverIconColor": "var(--color-neutral-800)",
    "menuButtonIconId": "menu",
    "menuButtonShape": "rounded",
    "menuButtonShadow": "light",
}

DEFAULTS_BY_KEY = {HEADER_MAIN_KEY: DEFAULT_HEADER_SETTINGS}


class CRUDHeaderSetting(CRUDBase[cfg_models.HeaderSetting, cfg_schemas.HeaderSettingSave, cfg_schemas.HeaderSettingSave]):
    def __init__(self):
        super().__init__(cfg_models.HeaderSetting)

    async def get_or_init(self, db: AsyncSession, *, key: str) -> cfg_models.HeaderSetting:
        """키에 해당하는 설정을 조회하고, 없으면 기본값으로 생성합니다."""
        db_obj = await self.get_by_attribute(db, attribute="key", value=key)
        if db_obj is None:
            logger.info("Initializing '%s' settings with defaults", key)
            db_obj = cfg_models.HeaderSetting(key=key, settings=copy.deepcopy(DEFAULTS_BY_KEY[key]))
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)
        return db_obj

    async def merge(self, db: AsyncSession, *, key: str, settings: Dict[str, Any]) -> cfg_models.HeaderSetting:
        db_obj = await self.get_or_init(db, key=key)
        # JSON 컬럼은 새 dict를 대입해야 변경이 감지됩니다.
        db_obj.settings = {**db_obj.settings, **settings}
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def reset(self, db: AsyncSession, *, key: str) -> cfg_models.HeaderSetting:
        db_obj = await self.get_or_init(db, key=key)
        db_obj.settings = copy.deepcopy(DEFAULTS_BY_KEY[key])
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj


header_setting = CRUDHeaderSetting()
