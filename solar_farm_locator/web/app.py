"""
Flask 애플리케이션 팩토리
"""
from flask import Flask

from solar_farm_locator.config import get_config

def create_app(analyzer=None, config_object=None):
    """
    Flask 앱 생성 및 설정

    Args:
        analyzer: 사용할 FeasibilityAnalyzer (None이면 실제 외부 API 사용)
        config_object: 설정 클래스 (None이면 환경에 따라 선택)
    """
    app = Flask(__name__)
    app.config.from_object(config_object or get_config())
    app.json.sort_keys = False

    if analyzer is None:
        from solar_farm_locator.core import create_analyzer
        analyzer = create_analyzer()
    app.extensions['feasibility_analyzer'] = analyzer

    # 라우트 등록
    from solar_farm_locator.web.routes import register_all_blueprints
    register_all_blueprints(app)

    return app
