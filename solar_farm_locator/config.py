"""
태양광 발전소 입지 분석 시스템 설정 파일
"""
import os
from dotenv import load_dotenv

# 환경변수 로드
load_dotenv()

class Config:
    """기본 설정"""
    # Flask 설정
    FLASK_ENV = os.getenv('FLASK_ENV', 'production')
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'false').lower() == 'true'
    PORT = int(os.getenv('PORT', 8080))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # 외부 API 설정
    PVGIS_BASE_URL = os.getenv('PVGIS_BASE_URL', 'https://re.jrc.ec.europa.eu/api/MRcalc')
    NOMINATIM_REVERSE_URL = os.getenv(
        'NOMINATIM_REVERSE_URL', 'https://nominatim.openstreetmap.org/reverse'
    )
    HTTP_USER_AGENT = os.getenv('HTTP_USER_AGENT', 'SolarFarmLocator/1.0')
    HTTP_TIMEOUT = float(os.getenv('HTTP_TIMEOUT', 10))

    # 격자 탐색 설정
    SWEEP_MAX_WORKERS = int(os.getenv('SWEEP_MAX_WORKERS', 8))
    SWEEP_TIMEOUT = float(os.getenv('SWEEP_TIMEOUT', 300))
    MAX_GRID_CELLS = int(os.getenv('MAX_GRID_CELLS', 2500))
    IRRADIANCE_MAX_RETRIES = int(os.getenv('IRRADIANCE_MAX_RETRIES', 2))
    IRRADIANCE_RETRY_BACKOFF = float(os.getenv('IRRADIANCE_RETRY_BACKOFF', 0.5))

    # 요청 기본값
    DEFAULT_DELTA = float(os.getenv('DEFAULT_DELTA', 0.3))
    DEFAULT_STEP = float(os.getenv('DEFAULT_STEP', 0.05))
    DEFAULT_PRICE = float(os.getenv('DEFAULT_PRICE', 7.5))
    DEFAULT_CAPACITY_MW = float(os.getenv('DEFAULT_CAPACITY_MW', 5))
    DEFAULT_YEAR = int(os.getenv('DEFAULT_YEAR', 2023))

    # 등급 기준 (kWh/m²/월, 하한 포함 / 상한 제외)
    TIER_THRESHOLDS = (
        ('moderate', 100.0),
        ('good', 150.0),
        ('excellent', 200.0),
    )

    # 경제성 계수
    CAPEX_PER_MW = 4.25            # crore/MW
    TRANSMISSION_COST_PER_KM = 1.8  # crore/km
    COST_OFFSET_PER_KWH = 3.74
    DAILY_HOURS_PER_MW = 4 * 1000   # kWh/MW/일
    CAPACITY_FACTOR = 0.3
    CRORE = 1e7
    RECOVERY_PROJECTION_YEARS = 10

    # 데이터 파일 경로
    DATA_DIR = os.getenv('DATA_DIR', 'data')
    GAZETTEER_PATH = os.getenv('GAZETTEER_PATH', os.path.join(DATA_DIR, 'cities15000.csv'))

class DevelopmentConfig(Config):
    """개발 환경 설정"""
    FLASK_DEBUG = True
    FLASK_ENV = 'development'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')

class ProductionConfig(Config):
    """운영 환경 설정"""
    FLASK_DEBUG = False
    FLASK_ENV = 'production'

class TestingConfig(Config):
    """테스트 환경 설정"""
    FLASK_DEBUG = False
    FLASK_ENV = 'testing'
    SWEEP_MAX_WORKERS = 4
    SWEEP_TIMEOUT = 30.0
    IRRADIANCE_MAX_RETRIES = 0
    IRRADIANCE_RETRY_BACKOFF = 0.0

# 환경에 따른 설정 선택
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config():
    """현재 환경의 설정 반환"""
    env = os.getenv('FLASK_ENV', 'default')
    return config.get(env, config['default'])
