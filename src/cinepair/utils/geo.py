"""Geolocation helpers used for travel-time estimates."""

import math

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two coordinates.

    Args:
        lat1: Latitude of the origin in decimal degrees
        lon1: Longitude of the origin in decimal degrees
        lat2: Latitude of the destination in decimal degrees
        lon2: Longitude of the destination in decimal degrees

    Returns:
        Distance in kilometers

    Example:
        >>> # TOHO Shinjuku to TOHO Hibiya (~6 km)
        >>> 5.5 < haversine_km(35.6938, 139.7006, 35.6748, 139.7601) < 6.5
        True
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def estimate_transit_minutes(
    distance_km: float,
    speed_kmh: float = 30.0,
    overhead_minutes: int = 15,
) -> int:
    """
    Rough public-transport journey time for a straight-line distance.

    Assumes an average train speed plus a flat allowance for walking to
    stations and changing lines. The result is rounded up to whole minutes.
    """
    return math.ceil(distance_km / speed_kmh * 60 + overhead_minutes)
