# shop_admin/domains/cat/routers.py

"""
'cat' 도메인 (카테고리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from fastapi import APIRouter

from shop_admin.core.staging_routes import add_staging_routes

from . import crud as cat_crud
from . import schemas as cat_schemas

router = APIRouter(
    tags=["Category Management (카테고리 관리)"],
    responses={404: {"description": "Not found"}},
)

add_staging_routes(
    router,
    path="/categories",
    label="categories",
    crud=cat_crud.category_staging,
    resource=cat_crud.categories,
    create_schema=cat_schemas.CategoryCreate,
    update_schema=cat_schemas.CategoryUpdate,
    staging_read=cat_schemas.CategoryStagingRead,
    production_read=cat_schemas.CategoryRead,
)
