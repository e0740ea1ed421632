# shop_admin/domains/prd/routers.py

"""
'prd' 도메인 (상품 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- /product-types/...: 상품 유형
- /products/...     : 상품
"""

from fastapi import APIRouter

from shop_admin.core.staging_routes import add_staging_routes

from . import crud as prd_crud
from . import schemas as prd_schemas

router = APIRouter(
    tags=["Product Management (상품 관리)"],
    responses={404: {"description": "Not found"}},
)

add_staging_routes(
    router,
    path="/product-types",
    label="product types",
    crud=prd_crud.product_type_staging,
    resource=prd_crud.product_types,
    create_schema=prd_schemas.ProductTypeCreate,
    update_schema=prd_schemas.ProductTypeUpdate,
    staging_read=prd_schemas.ProductTypeStagingRead,
    production_read=prd_schemas.ProductTypeRead,
)

add_staging_routes(
    router,
    path="/products",
    label="products",
    crud=prd_crud.product_staging,
    resource=prd_crud.products,
    create_schema=prd_schemas.ProductCreate,
    update_schema=prd_schemas.ProductUpdate,
    staging_read=prd_schemas.ProductStagingRead,
    production_read=prd_schemas.ProductRead,
)
