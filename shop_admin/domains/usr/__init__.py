# shop_admin/domains/usr/__init__.py

"""
'usr' 도메인 패키지입니다.

관리자 API에 접근하는 사용자 계정, 역할(ADMIN/EDITOR/USER),
그리고 JWT 기반 로그인을 담당합니다.

주요 서브모듈:
- `models.py`: users 테이블과 UserRole Enum.
- `schemas.py`: 사용자 생성/수정/조회 및 토큰 스키마.
- `crud.py`: 사용자 CRUD 및 인증 로직.
- `routers.py`: 로그인, 내 정보, 사용자 관리 엔드포인트.
"""

__title__ = "Shop Admin User Domain"
__description__ = "Manages user accounts and handles authentication."
__version__ = "0.1.0"
__all__ = []
