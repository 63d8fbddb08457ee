import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from comedor.domain.Confirmation import Confirmation
from comedor.events.Event_Bus import GLOBAL_EVENT_BUS, CONFIRMATION_SAVED
from comedor.infra.json_store import load_json, atomic_write
from comedor.infra.paths import CONFIRMATIONS_FILENAME, data_file
from comedor.logic.days import week_id

logger = logging.getLogger(__name__)


def _key(week: str, branch_id: str) -> str:
    return f"{week}:{branch_id}"


class ConfirmationRepository:
    def __init__(self, data_dir: Optional[Path] = None, bus=None):
        self.path = data_file(CONFIRMATIONS_FILENAME, data_dir)
        self.bus = bus or GLOBAL_EVENT_BUS

    def _load_store(self) -> dict:
        store = load_json(self.path, {})
        return store if isinstance(store, dict) else {}

    def get(self, week_start, branch_id: str) -> Confirmation:
        """Stored confirmation for (week, branch), or a new empty one."""
        week = week_id(week_start)
        doc = self._load_store().get(_key(week, branch_id))
        if not doc:
            return Confirmation(week, branch_id)
        conf = Confirmation.from_dict(doc)
        conf.week_id, conf.branch_id = week, branch_id
        return conf

    def save(self, conf: Confirmation) -> None:
        conf.week_id = week_id(conf.week_id)
        conf.timestamp = datetime.now()
        store = self._load_store()
        store[conf.key] = conf.to_dict()
        atomic_write(self.path, store)
        logger.info("Saved confirmation %s (%d confirmations)", conf.key, conf.total_confirmations)
        self.bus.publish(CONFIRMATION_SAVED, {
            "week_id": conf.week_id,
            "branch_id": conf.branch_id,
            "confirmations": conf.total_confirmations,
        })

    def list_for_week(self, week_start) -> List[Confirmation]:
        week = week_id(week_start)
        prefix = f"{week}:"
        store = self._load_store()
        return [Confirmation.from_dict(doc) for key, doc in sorted(store.items()) if key.startswith(prefix)]
