# shop_admin/domains/__init__.py

"""
비즈니스 도메인 패키지 모음입니다.

- `usr`: 사용자, 역할, 로그인
- `cat`: 상품 카테고리
- `ven`: 공급업체
- `prm`: 프로모션
- `tax`: 세금 설정 및 세금 규칙
- `prd`: 상품
- `cfg`: 사이트 헤더 설정
- `models`: 모든 도메인의 SQLModel 모델 집합
"""
