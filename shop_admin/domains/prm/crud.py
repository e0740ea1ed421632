# shop_admin/domains/prm/crud.py

"""
'prm' 도메인의 CRUD 인스턴스와 게시 리소스를 선언하는 모듈입니다.
"""

from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import status

from shop_admin.core.crud_base import CRUDBase, CRUDStagingBase
from shop_admin.core.publishing import PublishableResource, publishable_fields
from shop_admin.core.responses import ApiException

from . import models as prm_models
from . import schemas as prm_schemas


class CRUDPromotionStaging(
    CRUDStagingBase[prm_models.PromotionStaging, prm_schemas.PromotionCreate, prm_schemas.PromotionUpdate]
):
    def __init__(self):
        super().__init__(prm_models.PromotionStaging, unique_field="code", order_by=["name"])

    async def update(
        self, db: AsyncSession, *, db_obj: prm_models.PromotionStaging, obj_in: prm_schemas.PromotionUpdate
    ) -> prm_models.PromotionStaging:
        """
        부분 수정 값과 기존 값을 합친 결과로 할인 값/기간 규칙을 다시 검증합니다.
        """
        changes = obj_in.model_dump(exclude_unset=True)
        try:
            prm_schemas.check_promotion_rules(
                changes.get("type", db_obj.type),
                changes.get("value", db_obj.value),
                changes.get("starts_at", db_obj.starts_at),
                changes.get("ends_at", db_obj.ends_at),
            )
        except ValueError as e:
            raise ApiException(status.HTTP_400_BAD_REQUEST, str(e))
        return await super().update(db, db_obj=db_obj, obj_in=obj_in)


class CRUDPromotion(CRUDBase[prm_models.Promotion, prm_schemas.PromotionCreate, prm_schemas.PromotionProductionPatch]):
    """운영 프로모션 직접 수정용 CRUD (게시 흐름과 별개)"""

    def __init__(self):
        super().__init__(prm_models.Promotion)


promotion_staging = CRUDPromotionStaging()
promotion = CRUDPromotion()

promotions = PublishableResource(
    label="promotions",
    staging_model=prm_models.PromotionStaging,
    production_model=prm_models.Promotion,
    fields=publishable_fields(prm_models.PromotionBase),
    order_by=["name"],
)
