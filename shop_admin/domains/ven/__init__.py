# shop_admin/domains/ven/__init__.py

"""
'ven' 도메인 (공급업체 관리) 패키지입니다.
공급업체 코드(code)를 자연 키로 사용합니다.
"""

__title__ = "Shop Admin Supplier Domain"
__version__ = "0.1.0"
__all__ = []
