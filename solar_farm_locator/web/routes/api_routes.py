"""
API 엔드포인트 라우트
"""
import logging

from flask import Blueprint, current_app, jsonify, request

from solar_farm_locator.core.analysis import AnalysisRequest
from solar_farm_locator.core.errors import InvalidEconomicsInput, InvalidParameters, SolarFarmError
from solar_farm_locator.core.models import Coordinate

api_bp = Blueprint('api', __name__)
logger = logging.getLogger(__name__)


def _analyzer():
    return current_app.extensions['feasibility_analyzer']


def _error_response(error: SolarFarmError):
    return jsonify({'success': False, 'error': error.message, 'type': error.__class__.__name__}), error.http_status


@api_bp.route('/analyze', methods=['POST'])
def analyze():
    """격자 일사량 분석 + 정착지 + 경제성"""
    try:
        payload = request.get_json(silent=True)
        analysis_request = AnalysisRequest.from_payload(payload)

        result = _analyzer().analyze(analysis_request)

        return jsonify({
            'success': True,
            **result.to_dict()
        })

    except SolarFarmError as e:
        logger.info("분석 요청 거부: %s", e.message)
        return _error_response(e)
    except Exception as e:
        logger.exception("분석 중 예상치 못한 오류")
        return jsonify({'success': False, 'error': f'분석 중 오류가 발생했습니다: {str(e)}'}), 500


@api_bp.route('/resolve_city')
def resolve_city():
    """도시명 -> 좌표"""
    city = request.args.get('city')

    try:
        coordinate = _analyzer().gazetteer.resolve(city)
    except SolarFarmError as e:
        return _error_response(e)

    return jsonify({'success': True, 'city': city, **coordinate.to_dict()})


@api_bp.route('/validate_location')
def validate_location():
    """위치 좌표 검증"""
    lat = request.args.get('lat', type=float)
    lon = request.args.get('lon', type=float)

    if lat is None or lon is None:
        return jsonify({'valid': False, 'message': '위도와 경도를 입력해주세요.'})

    is_valid = Coordinate(lat, lon).is_valid()

    return jsonify({
        'valid': is_valid,
        'message': '유효한 좌표입니다.' if is_valid else '유효하지 않은 좌표입니다.'
    })


@api_bp.route('/economics')
def economics():
    """경제성 계산만 수행 (용량, 단가, 거리)"""
    capacity = request.args.get('capacity', type=float)
    price = request.args.get('price', type=float)
    raw_distance = request.args.get('distance')

    if capacity is None or price is None:
        return _error_response(InvalidParameters('capacity와 price를 입력해주세요.'))

    if raw_distance is None or raw_distance == '':
        distance = 0.0
    else:
        try:
            distance = float(raw_distance)
        except ValueError:
            return _error_response(InvalidParameters(f"distance 값이 숫자가 아닙니다: {raw_distance!r}"))

    try:
        result = _analyzer().financial_analyzer.compute_economics(capacity, price, distance)
    except InvalidEconomicsInput as e:
        return _error_response(e)

    return jsonify({'success': True, **result.to_dict()})


@api_bp.route('/health')
def health():
    """서비스 상태"""
    return jsonify({
        'status': 'ok',
        'gazetteer_size': len(_analyzer().gazetteer)
    })
