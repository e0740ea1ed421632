# shop_admin/domains/models/__init__.py

"""
이 파일은 모든 도메인의 SQLModel 모델들을 한 곳에서 중앙 관리하여,
다른 모듈에서 쉽게 임포트할 수 있도록 하는 역할을 합니다.
SQLModel.metadata가 모든 테이블을 인식하도록 보장합니다 (Alembic, 테스트의 create_all).
"""

# usr (User, UserRole)
from shop_admin.domains.usr.models import User, UserRole

# cat (CategoryStaging, Category)
from shop_admin.domains.cat.models import CategoryStaging, Category

# ven (SupplierStaging, Supplier)
from shop_admin.domains.ven.models import SupplierStaging, Supplier

# prm (PromotionStaging, Promotion, PromotionType)
from shop_admin.domains.prm.models import PromotionStaging, Promotion, PromotionType

# tax (TaxSettingStaging, TaxSetting, TaxRuleStaging, TaxRule)
from shop_admin.domains.tax.models import TaxSettingStaging, TaxSetting, TaxRuleStaging, TaxRule

# prd (ProductTypeStaging, ProductType, ProductStaging, Product, ProductStatus)
from shop_admin.domains.prd.models import ProductTypeStaging, ProductType, ProductStaging, Product, ProductStatus

# cfg (HeaderSetting)
from shop_admin.domains.cfg.models import HeaderSetting


__all__ = [
    # usr
    "User", "UserRole",
    # cat
    "CategoryStaging", "Category",
    # ven
    "SupplierStaging", "Supplier",
    # prm
    "PromotionStaging", "Promotion", "PromotionType",
    # tax
    "TaxSettingStaging", "TaxSetting", "TaxRuleStaging", "TaxRule",
    # prd
    "ProductTypeStaging", "ProductType", "ProductStaging", "Product", "ProductStatus",
    # cfg
    "HeaderSetting",
]
