"""
좌표 간 거리 계산
"""
from math import asin, cos, radians, sin, sqrt

from .models import Coordinate

EARTH_RADIUS_KM = 6371.0


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """두 좌표 사이의 대권 거리 (하버사인 공식, km)"""
    if a == b:
        return 0.0

    lat1, lon1 = radians(a.lat), radians(a.lon)
    lat2, lon2 = radians(b.lat), radians(b.lon)

    h = sin((lat2 - lat1) / 2) ** 2 + cos(lat1) * cos(lat2) * sin((lon2 - lon1) / 2) ** 2
    return 2 * EARTH_RADIUS_KM * asin(sqrt(min(1.0, h)))
