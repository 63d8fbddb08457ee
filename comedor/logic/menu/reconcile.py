"""Weekly menu reconciliation.

Stored menus are keyed either by display names ("Lunes", "Miércoles") or by
canonical names ("lunes", "miercoles"), sometimes with missing days or days
without an ``items`` list. `reconcile_week` always builds a fresh mapping
over exactly the seven canonical days:

    {
      'lunes':     {'items': [...], <extra fields of the stored entry>},
      ...
      'domingo':   {'items': []},
    }
"""
from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, Optional

from comedor.logic.days import days_equal
from comedor.utilities.constants import DAYS_CANONICAL

__all__ = ["reconcile_week", "menu_days_from_document"]

# Top-level keys a stored menu document may carry besides its days
_DAY_CONTAINERS = ("days", "dailyMenus")


def _find_entry(raw_week: Mapping, canonical_day: str) -> Optional[Any]:
    found = None
    for key, value in raw_week.items():
        if days_equal(key, canonical_day):
            found = value  # last matching key wins
    return found


def _reconcile_day(entry: Any) -> Dict[str, Any]:
    if not isinstance(entry, Mapping):
        return {"items": []}
    day = dict(entry)
    items = day.get("items")
    if items is None:
        day["items"] = []
    elif isinstance(items, (list, tuple)):
        day["items"] = list(items)
    # any other value is kept as stored
    return day


def reconcile_week(raw_week: Optional[Mapping]) -> Dict[str, Dict[str, Any]]:
    """Return a complete Monday..Sunday menu keyed by canonical day names.

    Keys that are not weekday names are dropped. `raw_week` is not modified.
    """
    if not isinstance(raw_week, Mapping):
        raw_week = {}
    return {day: _reconcile_day(_find_entry(raw_week, day)) for day in DAYS_CANONICAL}


def menu_days_from_document(doc: Optional[Mapping]) -> Dict[str, Dict[str, Any]]:
    """Reconcile the days of a stored menu document, whatever shape it was saved in.

    Coordinator documents nest days under 'days' (older ones under
    'dailyMenus'); admin documents keep 'Lunes'..'Domingo' at the top level.
    """
    if not isinstance(doc, Mapping):
        return reconcile_week(None)
    for container in _DAY_CONTAINERS:
        nested = doc.get(container)
        if isinstance(nested, Mapping) and nested:
            return reconcile_week(nested)
    return reconcile_week(doc)
