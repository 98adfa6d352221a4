"""
입지 분석 데이터 모델
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Coordinate:
    """위경도 좌표 (도 단위)"""
    lat: float
    lon: float

    def is_valid(self) -> bool:
        """좌표 유효성 검증 (위도 -90 ~ 90, 경도 -180 ~ 180)"""
        if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (self.lat, self.lon)):
            return False
        if not (math.isfinite(self.lat) and math.isfinite(self.lon)):
            return False
        return -90 <= self.lat <= 90 and -180 <= self.lon <= 180

    def to_dict(self) -> Dict:
        return {'lat': self.lat, 'lon': self.lon}


@dataclass(frozen=True)
class GazetteerEntry:
    """지명 사전 항목"""
    name: str
    ascii_name: str
    latitude: float
    longitude: float

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


class FeasibilityTier(str, Enum):
    """일사량 기반 입지 등급"""
    UNFEASIBLE = 'unfeasible'
    MODERATE = 'moderate'
    GOOD = 'good'
    EXCELLENT = 'excellent'

    @classmethod
    def classify(cls, average: float, thresholds: Tuple[Tuple[str, float], ...] = None) -> 'FeasibilityTier':
        """
        월평균 일사량을 등급으로 분류

        하한은 포함, 상한은 제외합니다. (100 -> moderate, 199.999 -> good)
        """
        if thresholds is None:
            thresholds = (('moderate', 100.0), ('good', 150.0), ('excellent', 200.0))

        tier = cls.UNFEASIBLE
        for name, lower_bound in thresholds:
            if average >= lower_bound:
                tier = cls(name)
        return tier


@dataclass
class SamplePoint:
    """격자 셀 하나의 일사량 샘플"""
    coordinate: Coordinate
    monthly_irradiance: List[float]
    average: float

    def to_dict(self) -> Dict:
        return {
            'lat': self.coordinate.lat,
            'lon': self.coordinate.lon,
            'avg': self.average
        }


@dataclass(frozen=True)
class SettlementInfo:
    """역지오코딩으로 찾은 인근 정착지"""
    name: str
    coordinate: Coordinate

    def to_dict(self) -> Dict:
        return {'name': self.name, **self.coordinate.to_dict()}


@dataclass
class EconomicsResult:
    """경제성 분석 결과 (단위: crore, 년)"""
    capital_expenditure: float
    transmission_cost: float
    recovery_years: float
    distance_km: float
    recovery_projection: List[Dict] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'capex': self.capital_expenditure,
            'transmissionCost': self.transmission_cost,
            'recoveryYears': self.recovery_years,
            'distanceKm': self.distance_km,
            'projection': self.recovery_projection
        }


@dataclass
class SweepResult:
    """격자 탐색 결과"""
    best_point: SamplePoint
    tiers: Dict[FeasibilityTier, List[SamplePoint]]
    total_cells: int
    failed_cells: int

    @property
    def sampled_cells(self) -> int:
        return self.total_cells - self.failed_cells


@dataclass
class AnalysisResult:
    """요청 하나에 대한 전체 분석 결과"""
    base: Coordinate
    sweep: SweepResult
    settlement: Optional[SettlementInfo] = None
    economics: Optional[EconomicsResult] = None

    @property
    def best_point(self) -> SamplePoint:
        return self.sweep.best_point

    @property
    def tiers(self) -> Dict[FeasibilityTier, List[SamplePoint]]:
        return self.sweep.tiers

    def to_dict(self) -> Dict:
        best = self.sweep.best_point
        return {
            'base': self.base.to_dict(),
            'max': {
                'value': best.average,
                'lat': best.coordinate.lat,
                'lon': best.coordinate.lon,
                'monthly': list(best.monthly_irradiance)
            },
            'ranges': {
                tier.value: [point.to_dict() for point in self.sweep.tiers.get(tier, [])]
                for tier in FeasibilityTier
            },
            'settlement': self.settlement.to_dict() if self.settlement else None,
            'economics': self.economics.to_dict() if self.economics else None,
            'stats': {
                'sampled': self.sweep.sampled_cells,
                'failed': self.sweep.failed_cells,
                'total': self.sweep.total_cells
            }
        }
