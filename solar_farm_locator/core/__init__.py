"""
core 모듈 - 태양광 발전소 입지 분석 시스템의 핵심 로직

이 모듈은 다음 컴포넌트들을 포함합니다:
- gazetteer: 도시명 -> 좌표 조회
- geo: 좌표 간 거리 계산
- irradiance_api: PVGIS 월별 일사량 조회
- grid_sampler: 격자 탐색 및 등급 분류
- settlement_api: Nominatim 역지오코딩
- financial_analysis: 경제성 분석
- analysis: 분석 요청 처리
"""

from .analysis import AnalysisRequest, FeasibilityAnalyzer
from .errors import (
    AllSamplesFailed,
    CellFetchFailure,
    InvalidEconomicsInput,
    InvalidParameters,
    NotFound,
    SettlementLookupFailure,
    SolarFarmError,
)
from .financial_analysis import FinancialAnalyzer, compute_economics
from .gazetteer import Gazetteer, get_gazetteer, load_gazetteer
from .geo import distance_km
from .grid_sampler import GridSampler
from .irradiance_api import IrradianceAPI
from .models import (
    AnalysisResult,
    Coordinate,
    EconomicsResult,
    FeasibilityTier,
    GazetteerEntry,
    SamplePoint,
    SettlementInfo,
)
from .settlement_api import SettlementAPI

__version__ = "1.0.0"
__author__ = "Solar Farm Locator Team"

# 편의를 위한 단축 함수들
def create_analyzer(gazetteer: Gazetteer = None) -> FeasibilityAnalyzer:
    """실제 외부 API를 사용하는 분석기 생성"""
    return FeasibilityAnalyzer(
        gazetteer=gazetteer if gazetteer is not None else get_gazetteer(),
        irradiance_source=IrradianceAPI(),
        settlement_source=SettlementAPI()
    )

def quick_analysis(lat, lon, delta=None, step=None):
    """좌표 기준 빠른 입지 분석"""
    payload = {'method': 'coords', 'latitude': lat, 'longitude': lon, 'delta': delta, 'scale': step}
    request = AnalysisRequest.from_payload(payload)
    return create_analyzer(Gazetteer()).analyze(request)

__all__ = [
    'AnalysisRequest',
    'AnalysisResult',
    'AllSamplesFailed',
    'CellFetchFailure',
    'Coordinate',
    'EconomicsResult',
    'FeasibilityAnalyzer',
    'FeasibilityTier',
    'FinancialAnalyzer',
    'Gazetteer',
    'GazetteerEntry',
    'GridSampler',
    'InvalidEconomicsInput',
    'InvalidParameters',
    'IrradianceAPI',
    'NotFound',
    'SamplePoint',
    'SettlementAPI',
    'SettlementInfo',
    'SettlementLookupFailure',
    'SolarFarmError',
    'compute_economics',
    'create_analyzer',
    'distance_km',
    'get_gazetteer',
    'load_gazetteer',
    'quick_analysis'
]
