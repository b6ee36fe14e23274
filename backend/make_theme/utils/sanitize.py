# make_theme/utils/sanitize.py
import re
from typing import Any


def sanitize_key(value: Any) -> str:
    """
    Lowercase, keeping only a-z, 0-9, dash and underscore.
    """
    return re.sub(r"[^a-z0-9_\-]", "", str(value).lower())


def sanitize_text_field(value: Any) -> str:
    text = re.sub(r"<[^>]*>", "", str(value))
    return re.sub(r"\s+", " ", text).strip()


def sanitize_title_with_dashes(value: Any) -> str:
    title = re.sub(r"<[^>]*>", "", str(value)).strip().lower()
    title = re.sub(r"[\s.]+", "-", title)
    title = re.sub(r"[^a-z0-9_\-]", "", title)
    return re.sub(r"-+", "-", title).strip("-")


def absint(value: Any) -> int:
    try:
        return abs(int(float(value)))
    except (TypeError, ValueError, OverflowError):
        return 0


def wp_validate_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() == "false":
        return False
    return bool(value)
