from __future__ import annotations

from typing import Optional

from ..core.exceptions import CaptureIncompleteError, ValidationError


def require_non_negative_int(value: int, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f"{field_name} must be a non-negative integer")
    return value


def require_capture(photo_url: Optional[str], latitude: Optional[float], longitude: Optional[float]) -> None:
    if not photo_url or not photo_url.strip():
        raise CaptureIncompleteError("Photo is required")
    if not isinstance(latitude, (int, float)) or not isinstance(longitude, (int, float)):
        raise CaptureIncompleteError("Location is required")
    if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
        raise CaptureIncompleteError("Location is out of range")
