# shop_admin/domains/cfg/__init__.py

"""
'cfg' 도메인 (사이트 설정) 패키지입니다.
헤더 설정을 데이터베이스에 저장하고 기본값 초기화/병합/재설정을 제공합니다.
"""

__title__ = "Shop Admin Site Settings Domain"
__version__ = "0.1.0"
__all__ = []
