import logging
import os
from typing import List, Optional

import pandas as pd

from solar_farm_locator.config import get_config

config = get_config()
logger = logging.getLogger(__name__)

def ensure_directories():
    """필요한 디렉토리들 생성"""
    directories = [
        config.DATA_DIR,
    ]

    for directory in directories:
        os.makedirs(directory, exist_ok=True)
        logger.debug("✅ 디렉토리 확인/생성: %s", directory)

def load_csv_file(file_path: str, columns: Optional[List[str]] = None) -> Optional[pd.DataFrame]:
    """
    CSV 파일 로드

    모든 열을 문자열로 읽습니다. 숫자 변환은 호출하는 쪽에서 처리합니다.

    Args:
        file_path: CSV 파일 경로
        columns: 읽을 열 목록 (None이면 전체)

    Returns:
        DataFrame 또는 None (파일이 없거나 읽을 수 없는 경우)
    """
    if not os.path.exists(file_path):
        logger.warning("⚠️ 파일이 존재하지 않습니다: %s", file_path)
        return None

    try:
        return pd.read_csv(
            file_path,
            encoding='utf-8',
            dtype=str,
            keep_default_na=False,
            usecols=columns
        )
    except (OSError, ValueError, pd.errors.ParserError) as e:
        logger.error("❌ CSV 파일 로드 오류: %s - %s", file_path, e)
        return None
