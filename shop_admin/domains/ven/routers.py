# shop_admin/domains/ven/routers.py

"""
'ven' 도메인 (공급업체 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from fastapi import APIRouter

from shop_admin.core.staging_routes import add_staging_routes

from . import crud as ven_crud
from . import schemas as ven_schemas

router = APIRouter(
    tags=["Supplier Management (공급업체 관리)"],
    responses={404: {"description": "Not found"}},
)

add_staging_routes(
    router,
    path="/suppliers",
    label="suppliers",
    crud=ven_crud.supplier_staging,
    resource=ven_crud.suppliers,
    create_schema=ven_schemas.SupplierCreate,
    update_schema=ven_schemas.SupplierUpdate,
    staging_read=ven_schemas.SupplierStagingRead,
    production_read=ven_schemas.SupplierRead,
)
