# shop_admin/core/staging_routes.py

"""
리소스 종류별 스테이징/운영/게시 엔드포인트를 한 번에 등록하는 모듈입니다.

각 도메인 라우터는 add_staging_routes()를 호출하여 아래 경로를 얻습니다.

    GET    {path}/staging                 스테이징 목록 (기본: 활성 행만)
    POST   {path}/staging                 스테이징 행 생성
    PUT    {path}/staging                 스테이징 일괄 저장 (items + removed)
    DELETE {path}/staging                 스테이징 비우기 (관리자)
    POST   {path}/staging/checkout        운영 데이터를 스테이징으로 복사
    PUT    {path}/staging/{id}            스테이징 행 수정
    DELETE {path}/staging/{id}            소프트 삭제 (삭제 예정 표시)
    POST   {path}/staging/{id}/restore    삭제 예정 행 복원
    GET    {path}/production              운영 목록
    GET    {path}/production/{id}         운영 단건 조회
    POST   {path}/publish                 스테이징 -> 운영 게시 (관리자)
"""

import logging
from collections import Counter
from typing import Any, List, Optional, Type

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.core import dependencies as deps
from shop_admin.core.crud_base import CRUDStagingBase
from shop_admin.core.publishing import EmptyStagingError, PublishableResource, StagingState, publisher
from shop_admin.core.responses import (
    ApiException,
    ApiResponse,
    StagingBulkResult,
    StagingBulkSave,
    success_response,
)
from shop_admin.domains.usr.models import User

logger = logging.getLogger(__name__)


def add_staging_routes(
    router: APIRouter,
    *,
    path: str,
    label: str,
    crud: CRUDStagingBase,
    resource: PublishableResource,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    staging_read: Type[BaseModel],
    production_read: Type[BaseModel],
) -> APIRouter:
    """
    router에 한 리소스 종류의 스테이징 편집, 운영 조회, 게시 엔드포인트를 등록합니다.
    label은 응답 메시지와 로그에 쓰이는 복수형 이름입니다 (예: "categories").
    """
    bulk_schema = StagingBulkSave[create_schema]
    key = crud.unique_field

    async def _get_staging_or_404(db: AsyncSession, item_id: int):
        db_obj = await crud.get(db, item_id)
        if db_obj is None:
            raise ApiException(status.HTTP_404_NOT_FOUND, f"Staging item {item_id} not found")
        return db_obj

    async def _ensure_key_available(db: AsyncSession, value: Any, exclude_id: Optional[int] = None) -> None:
        if await crud.get_active_by_key(db, value=value, exclude_id=exclude_id):
            raise ApiException(status.HTTP_400_BAD_REQUEST, f"{key} '{value}' is already used in staging")

    # -------------------------------------------------------------------------
    # 스테이징 편집
    # -------------------------------------------------------------------------
    @router.get(
        f"{path}/staging",
        response_model=ApiResponse[List[staging_read]],
        summary=f"스테이징 {label} 목록 조회",
    )
    async def list_staging(
        include_removed: bool = Query(False, description="삭제 예정 행 포함 여부"),
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: User = Depends(deps.get_current_editor_user),
    ):
        rows = await crud.get_staging_multi(db, include_removed=include_removed)
        return success_response(rows, count=len(rows))

    @router.post(
        f"{path}/staging",
        response_model=ApiResponse[staging_read],
        status_code=status.HTTP_201_CREATED,
        summary=f"스테이징 {label} 생성",
    )
    async def create_staging(
        obj_in: create_schema,
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: User = Depends(deps.get_current_editor_user),
    ):
        if key:
            await _ensure_key_available(db, getattr(obj_in, key))
        db_obj = await crud.create(db, obj_in=obj_in)
        return success_response(db_obj, message="Staging item created")

    @router.put(
        f"{path}/staging",
        response_model=ApiResponse[StagingBulkResult],
        summary=f"스테이징 {label} 일괄 저장",
    )
    async def save_staging(
        payload: bulk_schema,
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: User = Depends(deps.get_current_editor_user),
    ):
        """
        스테이징 전체를 요청 본문으로 교체합니다.
        items는 활성 행, removed는 삭제 예정 행으로 저장됩니다.
        """
        if key:
            duplicated = [value for value, n in Counter(getattr(item, key) for item in payload.items).items() if n > 1]
            if duplicated:
                raise ApiException(status.HTTP_400_BAD_REQUEST, f"Duplicate {key} in items: {', '.join(map(str, duplicated))}")
        saved, removed = await crud.replace_all(db, items=payload.items, removed=payload.removed)
        return success_response(
            StagingBulkResult(saved=saved, removed=removed),
            count=saved + removed,
            message=f"Saved {saved} staging {label}",
        )

    @router.delete(
        f"{path}/staging",
        response_model=ApiResponse[Any],
        summary=f"스테이징 {label} 비우기",
    )
    async def purge_staging(
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: User = Depends(deps.get_current_admin_user),
    ):
        deleted = await crud.clear(db)
        logger.info("Purged %d staging %s", deleted, label)
        return success_response(count=deleted, message=f"Deleted {deleted} staging {label}")

    @router.post(
        f"{path}/staging/checkout",
        response_model=ApiResponse[List[staging_read]],
        summary=f"운영 {label}를 스테이징으로 복사",
    )
    async def checkout_staging(
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: User = Depends(deps.get_current_editor_user),
    ):
        if await resource.count_staging(db) > 0:
            raise ApiException(status.HTTP_409_CONFLICT, f"Staging {label} is not empty")
        staged = await resource.checkout(db)
        return success_response(staged, count=len(staged), message=f"Checked out {len(staged)} {label}")

    @router.put(
        f"{path}/staging/{{item_id}}",
        response_model=ApiResponse[staging_read],
        summary=f"스테이징 {label} 수정",
    )
    async def update_staging(
        item_id: int,
        obj_in: update_schema,
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: User = Depends(deps.get_current_editor_user),
    ):
        db_obj = await _get_staging_or_404(db, item_id)
        # 삭제 예정 행의 키는 복원할 때 다시 검사합니다.
        if key and key in obj_in.model_fields_set and db_obj.state == StagingState.ACTIVE:
            await _ensure_key_available(db, getattr(obj_in, key), exclude_id=item_id)
        db_obj = await crud.update(db, db_obj=db_obj, obj_in=obj_in)
        return success_response(db_obj, message="Staging item updated")

    @router.delete(
        f"{path}/staging/{{item_id}}",
        response_model=ApiResponse[staging_read],
        summary=f"스테이징 {label} 삭제 예정 표시",
    )
    async def remove_staging(
        item_id: int,
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: User = Depends(deps.get_current_editor_user),
    ):
        db_obj = await _get_staging_or_404(db, item_id)
        db_obj = await crud.mark_removed(db, db_obj=db_obj)
        return success_response(db_obj, message="Staging item marked for removal")

    @router.post(
        f"{path}/staging/{{item_id}}/restore",
        response_model=ApiResponse[staging_read],
        summary=f"스테이징 {label} 복원",
    )
    async def restore_staging(
        item_id: int,
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: User = Depends(deps.get_current_editor_user),
    ):
        db_obj = await _get_staging_or_404(db, item_id)
        if key:
            await _ensure_key_available(db, getattr(db_obj, key), exclude_id=item_id)
        db_obj = await crud.restore(db, db_obj=db_obj)
        return success_response(db_obj, message="Staging item restored")

    # -------------------------------------------------------------------------
    # 운영 조회
    # -------------------------------------------------------------------------
    @router.get(
        f"{path}/production",
        response_model=ApiResponse[List[production_read]],
        summary=f"운영 {label} 목록 조회",
    )
    async def list_production(
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: User = Depends(deps.get_current_active_user),
    ):
        rows = await resource.read_production(db)
        return success_response(rows, count=len(rows))

    @router.get(
        f"{path}/production/{{item_id}}",
        response_model=ApiResponse[production_read],
        summary=f"운영 {label} 단건 조회",
    )
    async def read_production(
        item_id: int,
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: User = Depends(deps.get_current_active_user),
    ):
        db_obj = await db.get(resource.production_model, item_id)
        if db_obj is None:
            raise ApiException(status.HTTP_404_NOT_FOUND, f"Item {item_id} not found")
        return success_response(db_obj)

    # -------------------------------------------------------------------------
    # 게시
    # -------------------------------------------------------------------------
    @router.post(
        f"{path}/publish",
        response_model=ApiResponse[List[production_read]],
        summary=f"스테이징 {label} 게시",
    )
    async def publish(
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: User = Depends(deps.get_current_admin_user),
    ):
        """
        스테이징의 활성 행으로 운영 데이터를 전부 교체하고 스테이징을 비웁니다.
        하나의 트랜잭션으로 처리되며 실패 시 운영/스테이징 모두 변경되지 않습니다.
        """
        try:
            result = await publisher.publish(db, resource)
        except EmptyStagingError as e:
            raise ApiException(status.HTTP_400_BAD_REQUEST, str(e))
        except Exception:
            logger.exception("Failed to publish %s", label)
            raise ApiException(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to publish {label}")

        return success_response(
            result.published,
            count=result.count,
            message=f"Published {result.count} {label}",
        )

    return router
