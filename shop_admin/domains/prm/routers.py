# shop_admin/domains/prm/routers.py

"""
'prm' 도메인 (프로모션 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.core import dependencies as deps
from shop_admin.core.responses import ApiException, ApiResponse, success_response
from shop_admin.core.staging_routes import add_staging_routes
from shop_admin.domains.usr.models import User

from . import crud as prm_crud
from . import schemas as prm_schemas

router = APIRouter(
    tags=["Promotion Management (프로모션 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.patch(
    "/promotions/production/{promotion_id}",
    response_model=ApiResponse[prm_schemas.PromotionRead],
    summary="운영 프로모션 활성 여부/최대 사용 횟수 수정",
)
async def patch_production_promotion(
    promotion_id: int,
    patch_in: prm_schemas.PromotionProductionPatch,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: User = Depends(deps.get_current_admin_user),
):
    """
    게시 없이 운영 프로모션을 바로 수정합니다.
    다음 게시 때는 스테이징 내용으로 다시 교체됩니다.
    """
    db_promotion = await prm_crud.promotion.get(db, promotion_id)
    if not db_promotion:
        raise ApiException(status.HTTP_404_NOT_FOUND, "Promotion not found")
    db_promotion = await prm_crud.promotion.update(db, db_obj=db_promotion, obj_in=patch_in)
    return success_response(db_promotion, message="Promotion updated")


add_staging_routes(
    router,
    path="/promotions",
    label="promotions",
    crud=prm_crud.promotion_staging,
    resource=prm_crud.promotions,
    create_schema=prm_schemas.PromotionCreate,
    update_schema=prm_schemas.PromotionUpdate,
    staging_read=prm_schemas.PromotionStagingRead,
    production_read=prm_schemas.PromotionRead,
)
