"""
도시명 -> 좌표 조회 (GeoNames cities15000 기반 지명 사전)
"""
import logging
import math
from typing import Iterable, Optional

import pandas as pd

from solar_farm_locator.config import get_config
from solar_farm_locator.utils.file_utils import load_csv_file
from .errors import NotFound
from .models import Coordinate, GazetteerEntry

config = get_config()
logger = logging.getLogger(__name__)

GAZETTEER_COLUMNS = ['name', 'asciiname', 'latitude', 'longitude']


class Gazetteer:
    """읽기 전용 지명 사전"""

    def __init__(self, entries: Iterable[GazetteerEntry] = ()):
        self._entries = tuple(entries)

    def __len__(self):
        return len(self._entries)

    @property
    def entries(self):
        return self._entries

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> 'Gazetteer':
        """DataFrame에서 지명 사전 생성 (좌표를 변환할 수 없는 행은 제외)"""
        entries = []
        dropped = 0

        for row in df.itertuples(index=False):
            try:
                latitude, longitude = float(row.latitude), float(row.longitude)
            except ValueError:
                dropped += 1
                continue
            if not (math.isfinite(latitude) and math.isfinite(longitude)):
                dropped += 1
                continue
            entries.append(GazetteerEntry(row.name, row.asciiname, latitude, longitude))

        if dropped:
            logger.warning("⚠️ 좌표가 잘못된 지명 %d개 제외", dropped)
        return cls(entries)

    def find(self, name: Optional[str]) -> Optional[GazetteerEntry]:
        """ASCII 이름이 대소문자 구분 없이 일치하는 첫 번째 항목"""
        if not name or not name.strip():
            return None

        target = name.lower()
        for entry in self._entries:
            if entry.ascii_name.lower() == target:
                return entry
        return None

    def resolve(self, name: Optional[str]) -> Coordinate:
        """
        도시명을 좌표로 변환

        Args:
            name: 도시명 (대소문자 무관)

        Returns:
            도시 좌표

        Raises:
            NotFound: 이름이 비어 있거나 일치하는 항목이 없는 경우
        """
        entry = self.find(name)
        if entry is None:
            raise NotFound(f"데이터셋에서 도시를 찾을 수 없습니다: {name!r}")

        logger.info("📍 도시 '%s' 사용: [%s, %s]", name, entry.latitude, entry.longitude)
        return entry.coordinate


def load_gazetteer(file_path: str = None) -> Gazetteer:
    """CSV 파일에서 지명 사전 로드 (파일이 없으면 빈 사전)"""
    file_path = file_path or config.GAZETTEER_PATH
    df = load_csv_file(file_path, columns=GAZETTEER_COLUMNS)
    if df is None:
        logger.warning("⚠️ 지명 사전 없이 시작합니다. 도시명 검색을 사용할 수 없습니다.")
        return Gazetteer()

    gazetteer = Gazetteer.from_dataframe(df)
    logger.info("✅ 지명 사전 로드 완료: %d개 도시", len(gazetteer))
    return gazetteer


# 프로세스 전역 지명 사전 (최초 1회 로드 후 변경하지 않음)
_gazetteer: Optional[Gazetteer] = None


def get_gazetteer() -> Gazetteer:
    global _gazetteer
    if _gazetteer is None:
        _gazetteer = load_gazetteer()
    return _gazetteer
