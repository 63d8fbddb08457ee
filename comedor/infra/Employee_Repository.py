"""Employee repository helpers (file persistence)."""
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from comedor.domain.Employee import Employee
from comedor.events.Event_Bus import GLOBAL_EVENT_BUS, EMPLOYEES_IMPORTED
from comedor.infra.json_store import load_json, atomic_write
from comedor.infra.paths import EMPLOYEES_FILENAME, data_file
from comedor.utilities.text import normalize_text

logger = logging.getLogger(__name__)


class EmployeeRepository:
    def __init__(self, data_dir: Optional[Path] = None, bus=None):
        self.path = data_file(EMPLOYEES_FILENAME, data_dir)
        self.bus = bus or GLOBAL_EVENT_BUS

    def _load_all(self) -> List[dict]:
        data = load_json(self.path, [])
        return [e for e in data if isinstance(e, dict)] if isinstance(data, list) else []

    def list_for_branch(self, branch_id: str) -> List[Employee]:
        return [Employee.from_dict(e) for e in self._load_all() if e.get("branch_id") == branch_id]

    def add_many(self, branch_id: str, employees: Iterable[Employee]) -> Tuple[List[Employee], List[Employee]]:
        """Store new employees for a branch; names already present (ignoring case/accents) are skipped.

        Returns (added, skipped).
        """
        stored = self._load_all()
        known = {normalize_text(e.get("name")) for e in stored if e.get("branch_id") == branch_id}
        added, skipped = [], []
        for emp in employees:
            emp.branch_id = branch_id
            name_key = normalize_text(emp.name)
            if name_key in known:
                skipped.append(emp)
                continue
            known.add(name_key)
            stored.append(emp.to_dict())
            added.append(emp)
        if added:
            atomic_write(self.path, stored)
            self.bus.publish(EMPLOYEES_IMPORTED, {"branch_id": branch_id, "count": len(added)})
        logger.info("Branch %s: %d employees added, %d skipped", branch_id, len(added), len(skipped))
        return added, skipped

    def remove(self, employee_id: str) -> bool:
        stored = self._load_all()
        remaining = [e for e in stored if e.get("id") != employee_id]
        if len(remaining) == len(stored):
            return False
        atomic_write(self.path, remaining)
        return True
