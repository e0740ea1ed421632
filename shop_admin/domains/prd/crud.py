# shop_admin/domains/prd/crud.py

"""
'prd' 도메인의 CRUD 인스턴스와 게시 리소스를 선언하는 모듈입니다.

상품 유형과 상품은 서로 독립적으로 게시됩니다.
"""

from shop_admin.core.crud_base import CRUDStagingBase
from shop_admin.core.publishing import PublishableResource, publishable_fields

from . import models as prd_models
from . import schemas as prd_schemas

PRODUCT_TYPE_ORDER_BY = ["sort_order", "name"]


class CRUDProductTypeStaging(
    CRUDStagingBase[prd_models.ProductTypeStaging, prd_schemas.ProductTypeCreate, prd_schemas.ProductTypeUpdate]
):
    def __init__(self):
        super().__init__(prd_models.ProductTypeStaging, unique_field="slug", order_by=PRODUCT_TYPE_ORDER_BY)


class CRUDProductStaging(
    CRUDStagingBase[prd_models.ProductStaging, prd_schemas.ProductCreate, prd_schemas.ProductUpdate]
):
    def __init__(self):
        super().__init__(prd_models.ProductStaging, unique_field="product_code", order_by=["product_code"])


product_type_staging = CRUDProductTypeStaging()
product_staging = CRUDProductStaging()

product_types = PublishableResource(
    label="product types",
    staging_model=prd_models.ProductTypeStaging,
    production_model=prd_models.ProductType,
    fields=publishable_fields(prd_models.ProductTypeBase),
    order_by=PRODUCT_TYPE_ORDER_BY,
)

products = PublishableResource(
    label="products",
    staging_model=prd_models.ProductStaging,
    production_model=prd_models.Product,
    fields=publishable_fields(prd_models.ProductBase),
    order_by=["product_code"],
)
