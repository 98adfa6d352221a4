"""
입지 분석 요청 처리

중심점 결정 -> 격자 탐색 -> 정착지 조회 -> 경제성 계산 순서로 실행합니다.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from solar_farm_locator.config import get_config
from .errors import InvalidEconomicsInput, InvalidParameters, SettlementLookupFailure
from .financial_analysis import FinancialAnalyzer
from .gazetteer import Gazetteer
from .geo import distance_km
from .grid_sampler import GridSampler, validate_grid_parameters
from .models import AnalysisResult, Coordinate

config = get_config()
logger = logging.getLogger(__name__)

METHOD_CITY = 'city'
METHOD_COORDS = 'coords'


def _to_float(payload: Dict, *keys, default=None) -> Optional[float]:
    for key in keys:
        value = payload.get(key)
        if value is None or value == '':
            continue
        if isinstance(value, bool):
            raise InvalidParameters(f"{key} 값이 숫자가 아닙니다: {value!r}")
        try:
            return float(value)
        except (TypeError, ValueError):
            raise InvalidParameters(f"{key} 값이 숫자가 아닙니다: {value!r}")
    return default


@dataclass
class AnalysisRequest:
    """입지 분석 요청 파라미터"""
    method: str = METHOD_COORDS
    city: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    delta: float = config.DEFAULT_DELTA
    step: float = config.DEFAULT_STEP
    capacity_mw: float = config.DEFAULT_CAPACITY_MW
    price: float = config.DEFAULT_PRICE
    year: int = config.DEFAULT_YEAR

    @classmethod
    def from_payload(cls, payload: Optional[Dict]) -> 'AnalysisRequest':
        """
        JSON 요청 본문에서 요청 생성

        프론트엔드 필드명(scale, powerScale)과 설명적인 필드명(step, capacity_mw)을 모두 받습니다.
        생략된 격자/경제성 값에는 기본값을 사용합니다.
        """
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise InvalidParameters("요청 본문은 JSON 객체여야 합니다")

        method = str(payload.get('method') or METHOD_COORDS).lower()
        city = payload.get('city')

        year = _to_float(payload, 'year', default=config.DEFAULT_YEAR)
        if not float(year).is_integer():
            raise InvalidParameters(f"year 값이 정수가 아닙니다: {year}")

        return cls(
            method=method,
            city=str(city) if city is not None else None,
            latitude=_to_float(payload, 'latitude', 'lat'),
            longitude=_to_float(payload, 'longitude', 'lon'),
            delta=_to_float(payload, 'delta', default=config.DEFAULT_DELTA),
            step=_to_float(payload, 'scale', 'step', default=config.DEFAULT_STEP),
            capacity_mw=_to_float(payload, 'powerScale', 'capacity_mw', 'capacity', default=config.DEFAULT_CAPACITY_MW),
            price=_to_float(payload, 'price', default=config.DEFAULT_PRICE),
            year=int(year)
        )


class FeasibilityAnalyzer:
    """입지 분석 전체 흐름을 담당하는 클래스"""

    def __init__(self, gazetteer: Gazetteer, irradiance_source, settlement_source, sampler: GridSampler = None):
        self.gazetteer = gazetteer
        self.settlement_source = settlement_source
        self.sampler = sampler or GridSampler(irradiance_source)
        self.financial_analyzer = FinancialAnalyzer()

    def validate(self, request: AnalysisRequest):
        """네트워크 호출 전에 요청 파라미터 검증"""
        if request.method not in (METHOD_CITY, METHOD_COORDS):
            raise InvalidParameters(f"지원하지 않는 method입니다: {request.method!r}")

        validate_grid_parameters(request.delta, request.step)

        if not 1900 <= request.year <= 2100:
            raise InvalidParameters(f"year 값이 범위를 벗어났습니다: {request.year}")

        try:
            self.financial_analyzer.validate_inputs(request.capacity_mw, request.price)
        except InvalidEconomicsInput as e:
            raise InvalidParameters(e.message) from e

    def resolve_center(self, request: AnalysisRequest) -> Coordinate:
        """도시명 또는 좌표로 분석 중심점 결정"""
        if request.method == METHOD_CITY:
            return self.gazetteer.resolve(request.city)

        if request.latitude is None or request.longitude is None:
            raise InvalidParameters("위도와 경도를 입력해주세요.")

        center = Coordinate(request.latitude, request.longitude)
        if not center.is_valid():
            raise InvalidParameters(f"유효하지 않은 좌표입니다: ({request.latitude}, {request.longitude})")
        return center

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """
        입지 분석 실행

        Args:
            request: 분석 요청

        Returns:
            분석 결과 (정착지/경제성은 조회 실패 시 None)

        Raises:
            InvalidParameters: 잘못된 파라미터
            NotFound: 도시명을 찾을 수 없음
            AllSamplesFailed: 모든 격자 셀 조회 실패
        """
        self.validate(request)
        center = self.resolve_center(request)

        sweep = self.sampler.sample(center, request.delta, request.step, request.year)
        result = AnalysisResult(base=center, sweep=sweep)

        best = sweep.best_point.coordinate
        try:
            result.settlement = self.settlement_source.resolve_settlement(best)
        except SettlementLookupFailure as e:
            logger.warning("❌ 정착지 조회 실패, 경제성 분석을 생략합니다: %s", e)
            return result

        distance = distance_km(best, result.settlement.coordinate)
        try:
            result.economics = self.financial_analyzer.compute_economics(
                request.capacity_mw, request.price, distance
            )
        except InvalidEconomicsInput as e:
            logger.warning("❌ 경제성 계산 생략: %s", e)

        logger.info("🏁 분석 완료: 정착지 %s, 거리 %.2f km", result.settlement.name, distance)
        return result
