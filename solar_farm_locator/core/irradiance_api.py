"""
일사량 데이터 API 클래스
PVGIS MRcalc API와의 연동을 담당
"""
import logging
import math
import re
import time
from typing import List, Optional

import requests

from solar_farm_locator.config import get_config
from .errors import CellFetchFailure

config = get_config()
logger = logging.getLogger(__name__)

# basic 출력에서 연/월은 정수, 월별 일사량만 소수로 표기됨
_DECIMAL_PATTERN = re.compile(r'\d+\.\d+')
_RETRY_STATUS_CODES = {408, 429, 500, 502, 503, 504}


def parse_monthly_irradiance(text: str) -> List[float]:
    """
    PVGIS basic 출력에서 월별 수평면 일사량 추출

    Args:
        text: MRcalc 응답 본문

    Returns:
        12개월 일사량 리스트 (kWh/m²/월)

    Raises:
        ValueError: 값이 정확히 12개가 아니거나 유한하지 않은 경우
    """
    values = [float(match) for match in _DECIMAL_PATTERN.findall(text or '')]

    if len(values) != 12:
        raise ValueError(f"월별 일사량 12개가 필요하지만 {len(values)}개를 받았습니다")
    if not all(math.isfinite(v) for v in values):
        raise ValueError("유한하지 않은 일사량 값이 포함되어 있습니다")

    return values


class IrradianceAPI:
    """PVGIS를 사용한 월별 일사량 조회 클래스"""

    def __init__(self, session: Optional[requests.Session] = None):
        self.base_url = config.PVGIS_BASE_URL
        self.timeout = config.HTTP_TIMEOUT
        self.max_retries = config.IRRADIANCE_MAX_RETRIES
        self.backoff = config.IRRADIANCE_RETRY_BACKOFF
        self.session = session or requests.Session()
        self.session.headers.setdefault('User-Agent', config.HTTP_USER_AGENT)

    def build_params(self, lat: float, lon: float, year: int) -> dict:
        return {
            'lat': lat,
            'lon': lon,
            'horirrad': 1,
            'startyear': year,
            'endyear': year,
            'outputformat': 'basic'
        }

    def get_monthly_irradiance(
        self,
        lat: float,
        lon: float,
        year: int,
        deadline: Optional[float] = None
    ) -> List[float]:
        """
        특정 위치, 특정 연도의 월별 일사량 조회

        일시적 오류(연결 실패, 429, 5xx)는 지수 백오프로 재시도합니다.
        deadline(time.monotonic 기준)을 넘기는 재시도는 하지 않습니다.

        Args:
            lat: 위도
            lon: 경도
            year: 조회 연도
            deadline: 전체 탐색 마감 시각

        Returns:
            12개월 일사량 리스트

        Raises:
            CellFetchFailure: 조회 또는 파싱 실패
        """
        params = self.build_params(lat, lon, year)
        attempt = 0

        while True:
            try:
                response = self.session.get(self.base_url, params=params, timeout=self._timeout(deadline))
                response.raise_for_status()
                return parse_monthly_irradiance(response.text)

            except requests.exceptions.RequestException as e:
                if not self._should_retry(e, attempt, deadline):
                    raise CellFetchFailure(lat, lon, str(e)) from e
                delay = self.backoff * (2 ** attempt)
                logger.debug("일사량 재시도 %d/%d (%s, %s): %s", attempt + 1, self.max_retries, lat, lon, e)
                time.sleep(delay)
                attempt += 1

            except ValueError as e:
                raise CellFetchFailure(lat, lon, f"데이터 파싱 오류: {e}") from e

    def _timeout(self, deadline: Optional[float]) -> float:
        if deadline is None:
            return self.timeout
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise requests.exceptions.Timeout("탐색 마감 시간 초과")
        return min(self.timeout, remaining)

    def _should_retry(self, error: requests.exceptions.RequestException, attempt: int, deadline: Optional[float]) -> bool:
        if attempt >= self.max_retries:
            return False

        response = getattr(error, 'response', None)
        if response is not None and response.status_code not in _RETRY_STATUS_CODES:
            return False

        if deadline is not None:
            delay = self.backoff * (2 ** attempt)
            if time.monotonic() + delay >= deadline:
                return False

        return True
