# tests/__init__.py

"""
Shop Admin API의 테스트 스위트 패키지입니다.

- `conftest.py`: 인메모리 SQLite 엔진, 공유 세션, 역할별 인증 클라이언트 픽스처
- `test_main.py`, `test_tasks.py`: 앱 구성과 ARQ 태스크
- `test_publishing.py`: 게시 트랜잭션 자체의 불변식
- `domains/`: 도메인별 API 통합 테스트
"""

__title__ = "Shop Admin API Tests"
__description__ = "Test suite for the Shop Admin FastAPI application."
__version__ = "0.1.0"
__all__ = []
