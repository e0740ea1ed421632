# tests/domains/__init__.py

"""
도메인별 API 통합 테스트 패키지입니다.

- `test_auth_n.py`, `test_usr_n.py`: 로그인, 사용자 관리
- `test_cat_n.py`: 스테이징 편집부터 게시까지의 전체 흐름 (카테고리)
- `test_ven_n.py`, `test_prm_n.py`, `test_tax_n.py`, `test_prd_n.py`: 리소스 종류별 규칙과 게시
- `test_cfg_n.py`: 헤더 설정 저장/초기화
"""

__title__ = "Shop Admin Domain Tests"
__description__ = "Per-domain integration tests for the Shop Admin FastAPI application."
__version__ = "0.1.0"
__all__ = []
