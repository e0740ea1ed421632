# shop_admin/__init__.py

"""
Shop Admin FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 애플리케이션의 진입점 (main.py),
공통 설정, 데이터베이스 연결, 보안, 게시(publish) 절차를 담는 core 서브패키지,
그리고 각 비즈니스 도메인(상품, 카테고리, 공급업체, 프로모션, 세금, 사용자, 사이트 설정)을
대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Shop Admin API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Shop administration API backend (staging -> production publishing)."
__license__ = "MIT"
__all__ = []
