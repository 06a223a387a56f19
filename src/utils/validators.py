"""Input helpers shared by handlers and services."""

import re
from typing import Any, Optional, Tuple

from utils.error_handling import ValidationError

DATA_URI_PATTERN = re.compile(r"^data:image/(png|jpeg|jpg|webp);base64,", re.IGNORECASE)
DEFAULT_IMAGE_MEDIA_TYPE = "image/png"


def clean_text(value: Optional[str]) -> str:
    """Collapse None and whitespace-only input to an empty string."""
    return (value or "").strip()


def split_image_payload(image_base64: str) -> Tuple[str, str]:
    """
    Return (media_type, bare base64) for an uploaded ticket image.

    Browsers hand us FileReader output with a data URI prefix; the model only
    accepts the raw payload, so the prefix is stripped and used for the type.
    """
    match = DATA_URI_PATTERN.match(image_base64)
    if not match:
        return DEFAULT_IMAGE_MEDIA_TYPE, image_base64.strip()

    subtype = match.group(1).lower()
    if subtype == "jpg":
        subtype = "jpeg"
    return f"image/{subtype}", image_base64[match.end():].strip()


def parse_limit(raw: Any, default: int, maximum: int = 100) -> int:
    """Parse a page-size query parameter, clamped to 1..maximum."""
    if raw in (None, ""):
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError("limit must be an integer")
    return max(1, min(value, maximum))
