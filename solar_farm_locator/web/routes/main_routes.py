"""
메인 라우트
"""
from flask import Blueprint, jsonify

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    """서비스 안내"""
    return jsonify({
        'service': 'solar-farm-locator',
        'endpoints': {
            'analyze': 'POST /api/analyze',
            'resolve_city': 'GET /api/resolve_city?city=',
            'validate_location': 'GET /api/validate_location?lat=&lon=',
            'economics': 'GET /api/economics?capacity=&price=&distance=',
            'health': 'GET /api/health'
        }
    })

@main_bp.app_errorhandler(404)
def not_found(error):
    """404 에러"""
    return jsonify({'success': False, 'error': '페이지를 찾을 수 없습니다.'}), 404

@main_bp.app_errorhandler(405)
def method_not_allowed(error):
    """405 에러"""
    return jsonify({'success': False, 'error': '허용되지 않는 요청 방식입니다.'}), 405

@main_bp.app_errorhandler(500)
def internal_error(error):
    """500 에러"""
    return jsonify({'success': False, 'error': '서버 내부 오류가 발생했습니다.'}), 500
