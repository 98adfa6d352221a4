"""
입지 분석 오류 정의

요청 단위로만 의미를 갖는 오류들입니다. 프로세스를 중단시키는 오류는 없습니다.
"""


class SolarFarmError(Exception):
    """모든 분석 오류의 기본 클래스"""
    http_status = 500

    def __init__(self, message: str = None):
        super().__init__(message or self.__class__.__doc__)
        self.message = message or self.__class__.__doc__


class InvalidParameters(SolarFarmError):
    """잘못된 요청 파라미터 (delta, step, 용량, 단가, 좌표 등)"""
    http_status = 400


class NotFound(SolarFarmError):
    """도시를 찾을 수 없습니다"""
    http_status = 404


class CellFetchFailure(SolarFarmError):
    """격자 셀 일사량 조회 실패"""
    http_status = 502

    def __init__(self, lat: float, lon: float, reason: str = ''):
        self.lat = lat
        self.lon = lon
        self.reason = reason
        super().__init__(f"일사량 조회 실패 ({lat:.4f}, {lon:.4f}): {reason}")


class AllSamplesFailed(SolarFarmError):
    """모든 격자 셀의 일사량 조회에 실패했습니다"""
    http_status = 502


class SettlementLookupFailure(SolarFarmError):
    """인근 정착지 조회 실패"""
    http_status = 502


class InvalidEconomicsInput(SolarFarmError):
    """경제성 계산 입력값이 유효하지 않습니다"""
    http_status = 400
