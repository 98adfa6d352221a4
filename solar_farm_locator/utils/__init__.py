"""
utils 모듈 - 공통 유틸리티 함수들

이 모듈은 다음 유틸리티들을 포함합니다:
- file_utils: 파일 처리 유틸리티
"""

from .file_utils import (
    ensure_directories,
    load_csv_file
)

__version__ = "1.0.0"
__author__ = "Solar Farm Locator Team"

__all__ = [
    'ensure_directories',
    'load_csv_file'
]
