"""WeeklyMenu domain entity: week start, status, canonical seven-day menu, publication data."""
from __future__ import annotations
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from comedor.logic.days import (
    InvalidDate, monday_of, to_canonical, to_display,
    is_valid_date_string, is_canonical_day, format_date_display
)
from comedor.logic.menu.reconcile import reconcile_week, menu_days_from_document
from comedor.utilities.constants import (
    DATE_FORMAT, DAYS_CANONICAL, DAYS_DISPLAY, MENU_STATUS_DRAFT, MENU_STATUS_PUBLISHED, MENU_STATUS_TEXT
)


class MenuError(ValueError):
    """Raised when a menu operation is not allowed for the menu's current state."""


def _ts(value) -> Optional[str]:
    if isinstance(value, datetime):
        return value.isoformat(timespec="seconds")
    return value


def _is_dish(item) -> bool:
    if isinstance(item, dict):
        item = item.get("name")
    return isinstance(item, str) and bool(item.strip())


def dish_list(entry) -> List[Any]:
    """Items of a day entry as a list; stored values that are not lists give []."""
    items = entry.get("items") if isinstance(entry, dict) else None
    return list(items) if isinstance(items, (list, tuple)) else []


def _parse_ts(value) -> Optional[datetime]:
    if isinstance(value, datetime) or value is None:
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        return None


class WeeklyMenu:
    def __init__(self, week_start, days: Optional[dict] = None, status: str = MENU_STATUS_DRAFT,
                 created_at: Optional[datetime] = None, updated_at: Optional[datetime] = None,
                 published_at: Optional[datetime] = None, published_by: Optional[str] = None):
        self.week_start = week_start
        self.days = reconcile_week(days)
        self.status = status or MENU_STATUS_DRAFT
        self.created_at = created_at
        self.updated_at = updated_at
        self.published_at = published_at
        self.published_by = published_by

    @classmethod
    def empty(cls, week_start, now: Optional[datetime] = None) -> "WeeklyMenu":
        now = now or datetime.now()
        return cls(monday_of(week_start).strftime(DATE_FORMAT), created_at=now, updated_at=now)

    @property
    def is_published(self) -> bool:
        return self.status == MENU_STATUS_PUBLISHED

    @property
    def status_text(self) -> str:
        return MENU_STATUS_TEXT.get(self.status, "Desconocido")

    def set_day(self, day: str, items: List[Any], **extra) -> None:
        '''Replaces one day's entry. `day` may be written in either spelling.'''
        canonical = to_canonical(day)
        if not is_canonical_day(canonical):
            raise MenuError(f"Día desconocido: {day!r}")
        entry = dict(extra)
        entry["items"] = list(items or [])
        self.days[canonical] = entry
        self.updated_at = datetime.now()

    def validate(self) -> List[str]:
        errors: List[str] = []
        if not self.week_start:
            errors.append("Falta la fecha de inicio de la semana")
        elif not is_valid_date_string(self.week_start):
            errors.append("La fecha de inicio de la semana no es válida")

        missing = [d for d in DAYS_CANONICAL if d not in self.days]
        if missing:
            errors.append("Faltan días en el menú: " + ", ".join(to_display(d) for d in missing))

        if not any(_is_dish(item) for day in self.days.values() for item in dish_list(day)):
            errors.append("El menú debe tener al menos un platillo")
        return errors

    def publish(self, by: Optional[str] = None, now: Optional[datetime] = None) -> None:
        """Move a valid draft to 'published'. Raises MenuError otherwise."""
        if self.status != MENU_STATUS_DRAFT:
            raise MenuError("El menú ya ha sido publicado.")
        errors = self.validate()
        if errors:
            raise MenuError("; ".join(errors))
        now = now or datetime.now()
        self.status = MENU_STATUS_PUBLISHED
        self.published_at = now
        self.published_by = by
        self.updated_at = now

    def has_changed(self, other: Optional["WeeklyMenu"]) -> bool:
        if other is None:
            return True
        if self.status != other.status or self.week_start != other.week_start:
            return True
        for day in DAYS_CANONICAL:
            mine = self.days.get(day, {}).get("items")
            theirs = other.days.get(day, {}).get("items")
            if mine != theirs:
                return True
        return False

    def format_for_display(self) -> Dict[str, Any]:
        formatted: Dict[str, Any] = {
            "weekStart": self.week_start,
            "status": self.status,
            "statusText": self.status_text,
            "days": {},
        }
        for key, value in (("createdAt", self.created_at), ("updatedAt", self.updated_at),
                           ("publishedAt", self.published_at)):
            if value:
                formatted[key] = format_date_display(value)
        for canonical, display in zip(DAYS_CANONICAL, DAYS_DISPLAY):
            formatted["days"][display] = {"items": dish_list(self.days[canonical])}
        return formatted

    @staticmethod
    def confirmation_window(week_start, window: Dict[str, Any]) -> Dict[str, datetime]:
        """Opening and closing datetimes of the confirmation period for a week.

        `window` holds start_day/end_day (any spelling, taken from the week
        before `week_start`) and start_hour/end_hour as fractional hours,
        e.g. {'start_day': 'jueves', 'start_hour': 16.17, 'end_day': 'sabado', 'end_hour': 10}.
        """
        monday = monday_of(week_start)

        def _point(day_name, hour: float) -> datetime:
            canonical = to_canonical(day_name)
            if not is_canonical_day(canonical):
                raise MenuError(f"Día desconocido en la ventana de confirmación: {day_name!r}")
            day = monday - timedelta(days=7) + timedelta(days=DAYS_CANONICAL.index(canonical))
            hours = int(hour)
            minutes = round((hour - hours) * 60)
            return datetime(day.year, day.month, day.day, hours, minutes)

        return {
            "start": _point(window.get("start_day", "jueves"), float(window.get("start_hour", 16.17))),
            "end": _point(window.get("end_day", "sabado"), float(window.get("end_hour", 10))),
        }

    def is_confirmation_open(self, window: Dict[str, Any], now: Optional[datetime] = None) -> bool:
        if not self.is_published:
            return False
        now = now or datetime.now()
        bounds = self.confirmation_window(self.week_start, window)
        return bounds["start"] <= now <= bounds["end"]

    @staticmethod
    def from_dict(data):
        '''Creates a WeeklyMenu from a stored document in either day-name shape.'''
        d = dict(data) if isinstance(data, dict) else {}
        week_start = d.get("week_start") or d.get("weekStart") or d.get("startDate")
        if week_start:
            try:
                week_start = monday_of(week_start).strftime(DATE_FORMAT)
            except InvalidDate:
                pass
        menu = WeeklyMenu(
            week_start,
            status=d.get("status") or MENU_STATUS_DRAFT,
            created_at=_parse_ts(d.get("created_at") or d.get("createdAt")),
            updated_at=_parse_ts(d.get("updated_at") or d.get("updatedAt")),
            published_at=_parse_ts(d.get("published_at") or d.get("publishedAt")),
            published_by=d.get("published_by") or d.get("publishedBy"),
        )
        menu.days = menu_days_from_document(d)
        return menu

    def to_dict(self):
        '''Converts the WeeklyMenu to a dictionary for JSON persistence.'''
        return {
            "week_start": self.week_start,
            "status": self.status,
            "created_at": _ts(self.created_at),
            "updated_at": _ts(self.updated_at),
            "published_at": _ts(self.published_at),
            "published_by": self.published_by,
            "days": {day: dict(entry) for day, entry in self.days.items()},
        }

    def __str__(self) -> str:
        filled = sum(1 for d in self.days.values() if dish_list(d))
        return f"Menu {self.week_start} [{self.status}] - {filled}/7 días con platillos"

    __repr__ = __str__


__all__ = ["WeeklyMenu", "MenuError", "dish_list"]
