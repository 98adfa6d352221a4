"""
web.routes 모듈 - Flask 라우트 모음

이 모듈은 다음 라우트들을 포함합니다:
- main_routes: 서비스 안내 및 공통 에러 처리
- api_routes: REST API 엔드포인트들
"""

from .main_routes import main_bp
from .api_routes import api_bp

__version__ = "1.0.0"
__author__ = "Solar Farm Locator Team"

# 모든 블루프린트 목록
all_blueprints = [
    (main_bp, {}),  # (blueprint, url_prefix)
    (api_bp, {'url_prefix': '/api'})
]

def register_all_blueprints(app):
    """모든 블루프린트를 Flask 앱에 등록"""
    for blueprint, options in all_blueprints:
        app.register_blueprint(blueprint, **options)

    app.logger.debug("✅ %d개 블루프린트 등록 완료", len(all_blueprints))

__all__ = [
    'main_bp',
    'api_bp',
    'all_blueprints',
    'register_all_blueprints'
]
