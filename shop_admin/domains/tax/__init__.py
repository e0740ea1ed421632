# shop_admin/domains/tax/__init__.py

"""
'tax' 도메인 패키지입니다.
세금 설정(tax settings)과 세금 규칙(tax rules) 두 리소스를 각각 게시합니다.
"""

__title__ = "Shop Admin Tax Domain"
__version__ = "0.1.0"
__all__ = []
