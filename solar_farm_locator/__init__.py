"""
태양광 발전소 입지 분석 시스템

중심점 주변 격자의 일사량을 조회해 입지 등급을 나누고,
최적 지점 인근 정착지와 경제성을 계산합니다.
"""
import logging

from .config import get_config

__version__ = "1.0.0"

def configure_logging(level: str = None):
    """기본 로깅 설정"""
    level = level or get_config().LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )
