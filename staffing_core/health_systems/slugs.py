# staffing_core/health_systems/slugs.py
from __future__ import annotations

import re
import unicodedata

_APOSTROPHES = re.compile(r"['’]")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify_name(name: str) -> str:
    """
    "St. Mary's Hospital!!" -> "st-marys-hospital"

    ASCII-folds, lowercases, drops apostrophes, collapses every other run of
    non-alphanumerics into one hyphen and trims hyphens from both ends.
    May return "" (callers reject that).
    """
    value = unicodedata.normalize("NFKD", str(name or "")).encode("ascii", "ignore").decode("ascii")
    value = _APOSTROPHES.sub("", value.lower())
    return _NON_ALNUM.sub("-", value).strip("-")
