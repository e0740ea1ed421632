# shop_admin/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 비동기 엔진, 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `security.py`: 비밀번호 해싱, JWT 발급/검증, 역할 기반 권한 확인.
- `dependencies.py`: 라우터에서 사용하는 공통 의존성 함수들.
- `crud_base.py`: 공통 CRUD 및 스테이징(staging) CRUD 기본 클래스.
- `publishing.py`: staging -> production 게시 트랜잭션.
- `staging_routes.py`: 리소스 종류별 스테이징/운영/게시 엔드포인트 등록.
- `responses.py`: 공통 JSON 응답 봉투(envelope)와 예외.
- `tasks.py`: ARQ 워커가 실행하는 공통 태스크.
"""

__title__ = "Shop Admin Core"
__version__ = "0.1.0"
__all__ = []
