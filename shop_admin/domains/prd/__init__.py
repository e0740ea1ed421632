# shop_admin/domains/prd/__init__.py

"""
'prd' 도메인 (상품 관리) 패키지입니다.

- `models.py`: product_type_staging, product_types, product_staging, products 테이블
- `schemas.py`: 상품 유형과 상품의 생성/수정/조회 스키마
- `crud.py`: 스테이징 CRUD와 게시 리소스 선언
- `routers.py`: 스테이징/운영/게시 엔드포인트
"""

__title__ = "Shop Admin Product Domain"
__version__ = "0.1.0"
__all__ = []
