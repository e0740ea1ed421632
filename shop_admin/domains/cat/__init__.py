# shop_admin/domains/cat/__init__.py

"""
'cat' 도메인 패키지입니다.

상품 카테고리의 스테이징 편집과 운영 게시를 담당합니다.
카테고리는 slug로 식별되며, 상위 카테고리와 상품은 ID 대신 slug로 참조합니다.
"""

__title__ = "Shop Admin Category Domain"
__version__ = "0.1.0"
__all__ = []
