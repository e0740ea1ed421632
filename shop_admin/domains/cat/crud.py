# shop_admin/domains/cat/crud.py

"""
'cat' 도메인의 CRUD 인스턴스와 게시 리소스를 선언하는 모듈입니다.
"""

from shop_admin.core.crud_base import CRUDStagingBase
from shop_admin.core.publishing import PublishableResource, publishable_fields

from . import models as cat_models
from . import schemas as cat_schemas

ORDER_BY = ["sort_order", "name"]


class CRUDCategoryStaging(
    CRUDStagingBase[cat_models.CategoryStaging, cat_schemas.CategoryCreate, cat_schemas.CategoryUpdate]
):
    def __init__(self):
        super().__init__(cat_models.CategoryStaging, unique_field="slug", order_by=ORDER_BY)


category_staging = CRUDCategoryStaging()

categories = PublishableResource(
    label="categories",
    staging_model=cat_models.CategoryStaging,
    production_model=cat_models.Category,
    fields=publishable_fields(cat_models.CategoryBase),
    order_by=ORDER_BY,
)
