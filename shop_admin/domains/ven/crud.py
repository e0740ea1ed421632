# shop_admin/domains/ven/crud.py

"""
'ven' 도메인의 CRUD 인스턴스와 게시 리소스를 선언하는 모듈입니다.
"""

from shop_admin.core.crud_base import CRUDStagingBase
from shop_admin.core.publishing import PublishableResource, publishable_fields

from . import models as ven_models
from . import schemas as ven_schemas


class CRUDSupplierStaging(
    CRUDStagingBase[ven_models.SupplierStaging, ven_schemas.SupplierCreate, ven_schemas.SupplierUpdate]
):
    def __init__(self):
        super().__init__(ven_models.SupplierStaging, unique_field="code", order_by=["name"])


supplier_staging = CRUDSupplierStaging()

suppliers = PublishableResource(
    label="suppliers",
    staging_model=ven_models.SupplierStaging,
    production_model=ven_models.Supplier,
    fields=publishable_fields(ven_models.SupplierBase),
    order_by=["name"],
)
