"""
격자 일사량 탐색 및 입지 등급 분류 엔진
"""
import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Dict, List, Optional, Sequence

import numpy as np

from solar_farm_locator.config import get_config
from .errors import AllSamplesFailed, CellFetchFailure, InvalidParameters
from .models import Coordinate, FeasibilityTier, SamplePoint, SweepResult

config = get_config()
logger = logging.getLogger(__name__)

# 2*delta/step 이 부동소수 오차로 정수를 살짝 넘는 경우 (예: 0.6/0.05) 보정
_STEP_RATIO_TOLERANCE = 1e-9


def _is_positive_number(value) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value > 0
    )


def validate_grid_parameters(delta: float, step: float):
    """delta, step 은 0보다 큰 유한한 수여야 함"""
    if not _is_positive_number(delta):
        raise InvalidParameters(f"delta는 0보다 커야 합니다: {delta!r}")
    if not _is_positive_number(step):
        raise InvalidParameters(f"step은 0보다 커야 합니다: {step!r}")


def axis_size(delta: float, step: float) -> int:
    """한 축의 격자점 개수: ceil(2*delta/step) + 1"""
    validate_grid_parameters(delta, step)
    return max(1, math.ceil(2 * delta / step - _STEP_RATIO_TOLERANCE)) + 1


def build_axis(center: float, delta: float, step: float) -> List[float]:
    """
    center - delta 부터 center + delta 까지 step 간격의 좌표 (양 끝 포함, 오름차순)

    마지막 점은 center + delta 로 고정됩니다.
    """
    n = axis_size(delta, step)
    values = center - delta + np.arange(n) * step
    values[-1] = center + delta
    return [float(v) for v in values]


def build_lattice(center: Coordinate, delta: float, step: float) -> List[Coordinate]:
    """행 우선 순서(위도 바깥, 경도 안쪽, 오름차순)의 격자 좌표 목록"""
    latitudes = build_axis(center.lat, delta, step)
    longitudes = build_axis(center.lon, delta, step)
    return [Coordinate(lat, lon) for lat in latitudes for lon in longitudes]


def classify(average: float) -> FeasibilityTier:
    """월평균 일사량 -> 입지 등급"""
    return FeasibilityTier.classify(average, config.TIER_THRESHOLDS)


def fold_samples(
    lattice: Sequence[Coordinate],
    monthly_results: Sequence[Optional[List[float]]]
) -> SweepResult:
    """
    격자 순서대로 샘플을 등급별로 모으고 최댓값을 찾음

    최댓값은 더 클 때만 갱신되므로 같은 값이면 격자 순서상 앞선 점이 유지됩니다.
    조회에 실패한 셀(None)은 등급과 최댓값 후보에서 제외됩니다.

    Raises:
        AllSamplesFailed: 성공한 셀이 하나도 없는 경우
    """
    tiers: Dict[FeasibilityTier, List[SamplePoint]] = {tier: [] for tier in FeasibilityTier}
    best: Optional[SamplePoint] = None
    failed = 0

    for coordinate, monthly in zip(lattice, monthly_results):
        if monthly is None:
            failed += 1
            continue

        average = sum(monthly) / 12
        if not math.isfinite(average):
            failed += 1
            continue

        point = SamplePoint(coordinate=coordinate, monthly_irradiance=list(monthly), average=average)
        tiers[classify(average)].append(point)

        if best is None or average > best.average:
            best = point

    if best is None:
        raise AllSamplesFailed(f"격자 셀 {len(lattice)}개 모두 일사량 조회에 실패했습니다")

    return SweepResult(best_point=best, tiers=tiers, total_cells=len(lattice), failed_cells=failed)


class GridSampler:
    """중심점 주변 격자의 일사량을 조회하고 등급을 분류하는 클래스"""

    def __init__(self, irradiance_source, max_workers: int = None, timeout: float = None, max_cells: int = None):
        self.irradiance_source = irradiance_source
        self.max_workers = max_workers if max_workers is not None else config.SWEEP_MAX_WORKERS
        self.timeout = timeout if timeout is not None else config.SWEEP_TIMEOUT
        self.max_cells = max_cells if max_cells is not None else config.MAX_GRID_CELLS

    def sample(self, center: Coordinate, delta: float, step: float, year: int) -> SweepResult:
        """
        중심점 주변 격자 탐색

        Args:
            center: 중심 좌표
            delta: 중심에서 각 방향으로의 탐색 범위 (도)
            step: 격자 간격 (도)
            year: 일사량 조회 연도

        Returns:
            등급별 샘플과 최적 지점

        Raises:
            InvalidParameters: delta/step 이 0 이하이거나 격자가 너무 큰 경우
            AllSamplesFailed: 모든 셀의 조회 실패
        """
        validate_grid_parameters(delta, step)

        cells_per_axis = axis_size(delta, step)
        total = cells_per_axis ** 2
        if total > self.max_cells:
            raise InvalidParameters(
                f"격자가 너무 큽니다: {cells_per_axis}x{cells_per_axis}={total}개 (최대 {self.max_cells}개)"
            )

        lattice = build_lattice(center, delta, step)
        logger.info(
            "🔍 격자 탐색 시작: 중심 (%s, %s), delta=%s, step=%s, %d개 셀, %d년",
            center.lat, center.lon, delta, step, total, year
        )

        started = time.monotonic()
        deadline = started + self.timeout
        if self.max_workers <= 1:
            monthly_results = self._fetch_sequential(lattice, year, deadline)
        else:
            monthly_results = self._fetch_concurrent(lattice, year, deadline)

        result = fold_samples(lattice, monthly_results)
        logger.info(
            "✅ 격자 탐색 완료: 성공 %d / 실패 %d, 최대 %.2f at (%.4f, %.4f), %.1f초",
            result.sampled_cells, result.failed_cells, result.best_point.average,
            result.best_point.coordinate.lat, result.best_point.coordinate.lon,
            time.monotonic() - started
        )
        return result

    def _fetch_cell(self, coordinate: Coordinate, year: int, deadline: float) -> Optional[List[float]]:
        """셀 하나 조회 (실패 시 None)"""
        try:
            monthly = self.irradiance_source.get_monthly_irradiance(
                coordinate.lat, coordinate.lon, year, deadline=deadline
            )
            values = [float(v) for v in monthly]
        except CellFetchFailure as e:
            logger.warning("❌ %s", e)
            return None
        except (TypeError, ValueError) as e:
            logger.warning("❌ 일사량 데이터 오류 (%s, %s): %s", coordinate.lat, coordinate.lon, e)
            return None
        except Exception:
            logger.exception("❌ 일사량 조회 중 예기치 않은 오류 (%s, %s)", coordinate.lat, coordinate.lon)
            return None

        if len(values) != 12 or not all(math.isfinite(v) for v in values):
            logger.warning("❌ 월별 일사량 형식 오류 (%s, %s): %d개 값", coordinate.lat, coordinate.lon, len(values))
            return None
        return values

    def _fetch_sequential(self, lattice: Sequence[Coordinate], year: int, deadline: float) -> List[Optional[List[float]]]:
        results: List[Optional[List[float]]] = []
        for i, coordinate in enumerate(lattice):
            if time.monotonic() >= deadline:
                logger.warning("⏱️ 탐색 시간 초과: 남은 셀 %d개를 실패로 처리", len(lattice) - i)
                results.extend([None] * (len(lattice) - i))
                break
            results.append(self._fetch_cell(coordinate, year, deadline))
        return results

    def _fetch_concurrent(self, lattice: Sequence[Coordinate], year: int, deadline: float) -> List[Optional[List[float]]]:
        """
        셀을 병렬로 조회하고 결과를 격자 인덱스 위치에 저장

        완료 순서와 무관하게 결과는 격자 순서로 정렬되어 반환됩니다.
        """
        results: List[Optional[List[float]]] = [None] * len(lattice)
        workers = min(self.max_workers, len(lattice))
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix='grid-sweep')

        try:
            futures = {
                executor.submit(self._fetch_cell, coordinate, year, deadline): index
                for index, coordinate in enumerate(lattice)
            }
            done, not_done = wait(futures, timeout=max(0.0, deadline - time.monotonic()))

            for future in done:
                results[futures[future]] = future.result()

            if not_done:
                logger.warning("⏱️ 탐색 시간 초과: 남은 셀 %d개를 실패로 처리", len(not_done))
                for future in not_done:
                    future.cancel()
        finally:
            # 실행 중인 스레드는 기다리지 않음. 각 요청의 타임아웃이 마감 시각으로 제한되어 곧 종료됨
            executor.shutdown(wait=False, cancel_futures=True)

        return results
