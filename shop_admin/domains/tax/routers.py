# shop_admin/domains/tax/routers.py

"""
'tax' 도메인과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- /settings/...: 세금 설정
- /rules/...   : 세금 규칙
"""

from fastapi import APIRouter

from shop_admin.core.staging_routes import add_staging_routes

from . import crud as tax_crud
from . import schemas as tax_schemas

router = APIRouter(
    tags=["Tax Management (세금 관리)"],
    responses={404: {"description": "Not found"}},
)

add_staging_routes(
    router,
    path="/settings",
    label="tax settings",
    crud=tax_crud.tax_setting_staging,
    resource=tax_crud.tax_settings,
    create_schema=tax_schemas.TaxRateCreate,
    update_schema=tax_schemas.TaxRateUpdate,
    staging_read=tax_schemas.TaxRateStagingRead,
    production_read=tax_schemas.TaxRateRead,
)

add_staging_routes(
    router,
    path="/rules",
    label="tax rules",
    crud=tax_crud.tax_rule_staging,
    resource=tax_crud.tax_rules,
    create_schema=tax_schemas.TaxRateCreate,
    update_schema=tax_schemas.TaxRateUpdate,
    staging_read=tax_schemas.TaxRateStagingRead,
    production_read=tax_schemas.TaxRateRead,
)
