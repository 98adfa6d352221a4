"""
태양광 발전소의 경제성 분석 모듈
"""
import math
from typing import Dict, List

from solar_farm_locator.config import get_config
from .errors import InvalidEconomicsInput
from .models import EconomicsResult

config = get_config()

class FinancialAnalyzer:
    """경제성 분석 클래스"""

    def __init__(self):
        self.config = config

    def validate_inputs(self, capacity_mw: float, unit_price: float):
        """
        회수 기간 공식이 정의되는 입력인지 확인

        용량이 0 이하이거나 단가가 비용 상쇄 단가 이하이면 분모가 0 또는 음수가 됩니다.
        """
        for label, value in (('capacity', capacity_mw), ('price', unit_price)):
            if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
                raise InvalidEconomicsInput(f"{label} 값이 유효하지 않습니다: {value!r}")

        if capacity_mw <= 0:
            raise InvalidEconomicsInput(f"발전 용량은 0보다 커야 합니다: {capacity_mw}")

        if unit_price <= self.config.COST_OFFSET_PER_KWH:
            raise InvalidEconomicsInput(
                f"전력 단가는 {self.config.COST_OFFSET_PER_KWH}보다 커야 합니다: {unit_price}"
            )

    def compute_economics(self, capacity_mw: float, unit_price: float, distance_km: float) -> EconomicsResult:
        """
        설비 투자비, 송전 비용, 투자 회수 기간 계산

        Args:
            capacity_mw: 발전 용량 (MW)
            unit_price: 전력 판매 단가 (kWh당)
            distance_km: 최적 지점과 정착지 사이 거리 (km)

        Returns:
            경제성 분석 결과

        Raises:
            InvalidEconomicsInput: 회수 기간을 계산할 수 없는 입력
        """
        self.validate_inputs(capacity_mw, unit_price)

        if not isinstance(distance_km, (int, float)) or not math.isfinite(distance_km) or distance_km < 0:
            raise InvalidEconomicsInput(f"거리 값이 유효하지 않습니다: {distance_km!r}")

        capital_expenditure = capacity_mw * self.config.CAPEX_PER_MW
        transmission_cost = distance_km * self.config.TRANSMISSION_COST_PER_KM

        # 연간 순수익 = 일 발전량 x 365 x (단가 - 비용 상쇄 단가) x 이용률
        annual_revenue = (
            capacity_mw * self.config.DAILY_HOURS_PER_MW * 365
            * (unit_price - self.config.COST_OFFSET_PER_KWH) * self.config.CAPACITY_FACTOR
        )
        recovery_years = capital_expenditure * self.config.CRORE / annual_revenue

        if not math.isfinite(recovery_years) or recovery_years <= 0:
            raise InvalidEconomicsInput(f"회수 기간 계산 결과가 유효하지 않습니다: {recovery_years}")

        return EconomicsResult(
            capital_expenditure=capital_expenditure,
            transmission_cost=transmission_cost,
            recovery_years=recovery_years,
            distance_km=distance_km,
            recovery_projection=self.recovery_projection(recovery_years)
        )

    def recovery_projection(self, recovery_years: float, horizon_years: int = None) -> List[Dict]:
        """연도별 투자비 회수율 (%)"""
        if horizon_years is None:
            horizon_years = self.config.RECOVERY_PROJECTION_YEARS

        return [
            {
                'year': year,
                'recovered_percent': min(year / recovery_years, 1) * 100
            }
            for year in range(horizon_years + 1)
        ]


def compute_economics(capacity_mw: float, unit_price: float, distance_km: float) -> EconomicsResult:
    """기본 설정으로 경제성 계산"""
    return FinancialAnalyzer().compute_economics(capacity_mw, unit_price, distance_km)
