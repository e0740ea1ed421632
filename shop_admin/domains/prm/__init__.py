# shop_admin/domains/prm/__init__.py

"""
'prm' 도메인 (프로모션 관리) 패키지입니다.

스테이징/게시 흐름 외에, 운영 중인 프로모션의 활성 여부와
최대 사용 횟수를 바로 수정하는 엔드포인트를 제공합니다.
"""

__title__ = "Shop Admin Promotion Domain"
__version__ = "0.1.0"
__all__ = []
