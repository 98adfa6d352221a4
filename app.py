# 🌞 태양광 발전소 입지 분석 서버
# 실행: python app.py  (환경변수는 .env 에서 로드)

from solar_farm_locator import configure_logging
from solar_farm_locator.config import get_config
from solar_farm_locator.core import create_analyzer, get_gazetteer
from solar_farm_locator.utils import ensure_directories
from solar_farm_locator.web import create_app

config = get_config()

def main():
    configure_logging()

    # 📁 데이터 디렉토리 확인 후 지명 사전 1회 로드
    ensure_directories()
    gazetteer = get_gazetteer()

    app = create_app(analyzer=create_analyzer(gazetteer))

    # 🚀 웹 서버 실행
    app.logger.info("🌍 로컬에서 접속하세요: http://127.0.0.1:%d", config.PORT)
    app.run(host='0.0.0.0', port=config.PORT, debug=config.FLASK_DEBUG)

if __name__ == '__main__':
    main()
