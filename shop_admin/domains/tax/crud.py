# shop_admin/domains/tax/crud.py

"""
'tax' 도메인의 CRUD 인스턴스와 게시 리소스를 선언하는 모듈입니다.
세금 설정/규칙에는 자연 키가 없으므로 스테이징 중복 검사를 하지 않습니다.
"""

from shop_admin.core.crud_base import CRUDStagingBase
from shop_admin.core.publishing import PublishableResource, publishable_fields

from . import models as tax_models
from . import schemas as tax_schemas

TAX_FIELDS = publishable_fields(tax_models.TaxRateBase)


class CRUDTaxSettingStaging(
    CRUDStagingBase[tax_models.TaxSettingStaging, tax_schemas.TaxRateCreate, tax_schemas.TaxRateUpdate]
):
    def __init__(self):
        super().__init__(tax_models.TaxSettingStaging)


class CRUDTaxRuleStaging(
    CRUDStagingBase[tax_models.TaxRuleStaging, tax_schemas.TaxRateCreate, tax_schemas.TaxRateUpdate]
):
    def __init__(self):
        super().__init__(tax_models.TaxRuleStaging)


tax_setting_staging = CRUDTaxSettingStaging()
tax_rule_staging = CRUDTaxRuleStaging()

tax_settings = PublishableResource(
    label="tax settings",
    staging_model=tax_models.TaxSettingStaging,
    production_model=tax_models.TaxSetting,
    fields=TAX_FIELDS,
)

tax_rules = PublishableResource(
    label="tax rules",
    staging_model=tax_models.TaxRuleStaging,
    production_model=tax_models.TaxRule,
    fields=TAX_FIELDS,
)
