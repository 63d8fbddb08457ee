import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from comedor.domain.Menu import WeeklyMenu
from comedor.events.Event_Bus import GLOBAL_EVENT_BUS, MENU_PUBLISHED
from comedor.infra.json_store import load_json, atomic_write
from comedor.infra.paths import MENUS_FILENAME, data_file
from comedor.logic.days import week_id

logger = logging.getLogger(__name__)


class MenuRepository:
    def __init__(self, data_dir: Optional[Path] = None, bus=None):
        self.path = data_file(MENUS_FILENAME, data_dir)
        self.bus = bus or GLOBAL_EVENT_BUS

    def _load_store(self) -> dict:
        store = load_json(self.path, {})
        return store if isinstance(store, dict) else {}

    def get_week_menu(self, week_start) -> WeeklyMenu:
        """Return the menu of the week containing `week_start`, creating an empty draft if needed.

        Stored documents may use either day-name convention; the returned
        menu always has the seven canonical days.
        """
        key = week_id(week_start)
        store = self._load_store()
        if key not in store:
            menu = WeeklyMenu.empty(key)
            store[key] = menu.to_dict()
            atomic_write(self.path, store)
            logger.info("Created empty menu for week %s", key)
            return menu
        doc = store[key]
        if isinstance(doc, dict):
            doc.setdefault("week_start", key)
        return WeeklyMenu.from_dict(doc)

    def save_week_menu(self, menu: WeeklyMenu) -> None:
        key = week_id(menu.week_start)
        store = self._load_store()
        menu.week_start = key
        menu.updated_at = datetime.now()
        store[key] = menu.to_dict()
        atomic_write(self.path, store)

    def publish_week(self, week_start, by: Optional[str] = None) -> WeeklyMenu:
        """Publish the week's menu. MenuError propagates when it cannot be published."""
        menu = self.get_week_menu(week_start)
        menu.publish(by=by)
        self.save_week_menu(menu)
        logger.info("Menu %s published by %s", menu.week_start, by or "-")
        self.bus.publish(MENU_PUBLISHED, {"week_start": menu.week_start, "published_by": by})
        return menu

    def list_weeks(self) -> List[str]:
        return sorted(self._load_store().keys())
