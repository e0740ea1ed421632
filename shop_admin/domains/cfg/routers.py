# shop_admin/domains/cfg/routers.py

"""
'cfg' 도메인 (사이트 설정)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.core import dependencies as deps
from shop_admin.core.responses import ApiException, ApiResponse, success_response
from shop_admin.domains.usr.models import User

from . import crud as cfg_crud
from . import schemas as cfg_schemas

router = APIRouter(
    tags=["Site Settings (사이트 설정)"],
    responses={404: {"description": "Not found"}},
)


@router.get("/header-main", response_model=ApiResponse[cfg_schemas.HeaderSettingRead], summary="헤더 설정 조회")
async def read_header_settings(
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: User = Depends(deps.get_current_active_user),
):
    db_obj = await cfg_crud.header_setting.get_or_init(db, key=cfg_crud.HEADER_MAIN_KEY)
    return success_response(db_obj, message="Header settings retrieved successfully")


@router.post("/header-main", response_model=ApiResponse[cfg_schemas.HeaderSettingRead], summary="헤더 설정 저장")
async def save_header_settings(
    settings_in: cfg_schemas.HeaderSettingSave,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: User = Depends(deps.get_current_editor_user),
):
    """
    전달된 settings 객체를 저장된 설정에 최상위 키 단위로 병합합니다.
    """
    if not settings_in.settings:
        raise ApiException(status.HTTP_400_BAD_REQUEST, "Settings data is required")
    db_obj = await cfg_crud.header_setting.merge(db, key=cfg_crud.HEADER_MAIN_KEY, settings=settings_in.settings)
    return success_response(db_obj, message="Header settings saved successfully")


@router.post("/header-main/reset", response_model=ApiResponse[cfg_schemas.HeaderSettingRead], summary="헤더 설정 초기화")
async def reset_header_settings(
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: User = Depends(deps.get_current_editor_user),
):
    db_obj = await cfg_crud.header_setting.reset(db, key=cfg_crud.HEADER_MAIN_KEY)
    return success_response(db_obj, message="Header settings reset to defaults successfully")
