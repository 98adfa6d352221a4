"""
역지오코딩 API 클래스
Nominatim을 이용해 최적 지점에서 가장 가까운 정착지를 조회
"""
import logging
from typing import Dict, Optional

import requests

from solar_farm_locator.config import get_config
from .errors import SettlementLookupFailure
from .models import Coordinate, SettlementInfo

config = get_config()
logger = logging.getLogger(__name__)

# 주소 필드 우선순위
SETTLEMENT_FIELDS = ('city', 'town', 'village', 'hamlet')
UNKNOWN_SETTLEMENT = 'Unknown'


def extract_settlement_name(address: Optional[Dict]) -> str:
    """주소 정보에서 정착지 이름 추출 (city > town > village > hamlet)"""
    for field_name in SETTLEMENT_FIELDS:
        value = (address or {}).get(field_name)
        if value:
            return value
    return UNKNOWN_SETTLEMENT


class SettlementAPI:
    """Nominatim 역지오코딩 클래스"""

    def __init__(self, session: Optional[requests.Session] = None):
        self.reverse_url = config.NOMINATIM_REVERSE_URL
        self.timeout = config.HTTP_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.setdefault('User-Agent', config.HTTP_USER_AGENT)

    def resolve_settlement(self, coordinate: Coordinate) -> SettlementInfo:
        """
        좌표에서 가장 가까운 정착지 조회

        Args:
            coordinate: 조회할 좌표 (최적 일사량 지점)

        Returns:
            정착지 정보 (이름을 찾지 못하면 'Unknown')

        Raises:
            SettlementLookupFailure: 요청 실패 또는 주소 정보가 없는 응답
        """
        params = {
            'lat': coordinate.lat,
            'lon': coordinate.lon,
            'format': 'json'
        }

        try:
            response = self.session.get(self.reverse_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise SettlementLookupFailure(f"역지오코딩 요청 오류: {e}") from e
        except ValueError as e:
            raise SettlementLookupFailure(f"역지오코딩 응답 파싱 오류: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get('address'), dict):
            raise SettlementLookupFailure("역지오코딩 응답에 주소 정보가 없습니다")

        name = extract_settlement_name(data['address'])

        try:
            settlement_coordinate = Coordinate(
                float(data.get('lat', coordinate.lat)),
                float(data.get('lon', coordinate.lon))
            )
        except (TypeError, ValueError) as e:
            raise SettlementLookupFailure(f"정착지 좌표 변환 오류: {e}") from e

        if not settlement_coordinate.is_valid():
            raise SettlementLookupFailure("정착지 좌표가 유효하지 않습니다")

        logger.info("🏘️ 인근 정착지: %s (%s, %s)", name, settlement_coordinate.lat, settlement_coordinate.lon)
        return SettlementInfo(name=name, coordinate=settlement_coordinate)
