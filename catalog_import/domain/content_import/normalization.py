"""
Content Normalization Helpers

Pure functions turning platform-specific metadata strings into canonical
language, media type and duration values. Shared by every adapter.

These functions sit on the boundary between untrusted external metadata
and the internal model, so they never raise: malformed input degrades to
the default value.
"""

import math
import re
from typing import Any

from .value_objects import Language, MediaType

ISO_DURATION_PATTERN = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def map_language(value: Any) -> Language:
    """
    Infer the catalog language from a platform language hint.

    Substring heuristic, not a locale parser: any hint containing "ar"
    (which includes "arabic") maps to ARABIC, everything else to ENGLISH.

    Args:
        value: Language hint such as "en", "ar", "arabic-eg" or None

    Returns:
        Language enum value
    """
    if not isinstance(value, str):
        return Language.ENGLISH
    lang = value.lower()
    if "ar" in lang or "arabic" in lang:
        return Language.ARABIC
    return Language.ENGLISH


def map_media_type(value: Any) -> MediaType:
    """
    Infer the media type from a platform hint.

    Args:
        value: Type hint such as "video", "audio", "podcast" or None

    Returns:
        AUDIO when the hint mentions audio or podcast, VIDEO otherwise
    """
    if not isinstance(value, str):
        return MediaType.VIDEO
    media_type = value.lower()
    if "audio" in media_type or "podcast" in media_type:
        return MediaType.AUDIO
    return MediaType.VIDEO


def _seconds_from_number(value: float) -> int:
    if math.isnan(value) or math.isinf(value):
        return 0
    return max(0, int(value))


def parse_duration(value: Any) -> int:
    """
    Convert a platform duration into whole seconds.

    Accepts:
    - numbers of seconds (negative values clamp to 0)
    - numeric strings ("300")
    - ISO-8601 tokens ("PT4M13S", "PT1H30M45S", "PT2H")

    Anything else, including None, yields 0.

    Args:
        value: Raw duration from the platform

    Returns:
        Non-negative duration in seconds
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return _seconds_from_number(value)
    if not isinstance(value, str):
        return 0

    match = ISO_DURATION_PATTERN.search(value)
    if match:
        hours, minutes, seconds = (int(group or 0) for group in match.groups())
        return hours * 3600 + minutes * 60 + seconds

    try:
        return _seconds_from_number(float(value.strip()))
    except ValueError:
        return 0
