"""Text normalization helpers shared by day-name handling and spreadsheet import."""
from __future__ import annotations
import math
import unicodedata
from typing import Any


def normalize_text(value: Any) -> str:
    """Return `value` as trimmed, lowercase text without diacritical marks.

    None becomes '' and non-string values are coerced with str() first,
    so 'MIÉRCOLES ', 'miércoles' and 'Miercoles' all give 'miercoles'.
    """
    if value is None:
        return ""
    txt = unicodedata.normalize("NFD", str(value).strip())
    txt = "".join(c for c in txt if unicodedata.category(c) != "Mn")
    return unicodedata.normalize("NFC", txt).lower()


def clean_cell(value: Any) -> str:
    """Spreadsheet cell to stripped text. Empty/NaN cells give ''."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    txt = str(value).strip()
    # pandas renders missing timestamps/objects this way
    if txt in ("nan", "NaT", "None"):
        return ""
    return txt


__all__ = ["normalize_text", "clean_cell"]
