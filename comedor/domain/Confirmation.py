"""Confirmation domain entity: which employees of a branch eat on which days of a week."""
from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from comedor.logic.days import to_canonical, is_canonical_day
from comedor.utilities.constants import DAYS_CANONICAL


class ConfirmationError(ValueError):
    """Raised for confirmation entries that reference unknown days."""


def _canonical_days(days: Optional[Iterable[Any]]) -> List[str]:
    result: List[str] = []
    for day in days or []:
        canonical = to_canonical(day)
        if not is_canonical_day(canonical):
            raise ConfirmationError(f"Día desconocido: {day!r}")
        if canonical not in result:
            result.append(canonical)
    # Monday-first, regardless of input order
    return sorted(result, key=DAYS_CANONICAL.index)


class Confirmation:
    def __init__(self, week_id: str, branch_id: str, coordinator_id: Optional[str] = None,
                 employees: Optional[List[Dict[str, Any]]] = None, timestamp: Optional[datetime] = None):
        self.week_id = week_id
        self.branch_id = branch_id
        self.coordinator_id = coordinator_id
        self.timestamp = timestamp
        self.employees: List[Dict[str, Any]] = []
        for emp in employees or []:
            self.update_employee(emp.get("id"), emp.get("name", ""), emp.get("days", []))

    @property
    def key(self) -> str:
        return f"{self.week_id}:{self.branch_id}"

    def update_employee(self, employee_id: str, name: str, days: Iterable[Any] = ()) -> None:
        '''Adds the employee or replaces its confirmed days.'''
        canonical = _canonical_days(days)
        for emp in self.employees:
            if emp["id"] == employee_id:
                emp["days"] = canonical
                return
        self.employees.append({"id": employee_id, "name": name, "days": canonical})

    def remove_employee(self, employee_id: str) -> None:
        self.employees = [e for e in self.employees if e["id"] != employee_id]

    @property
    def total_employees(self) -> int:
        return len(self.employees)

    @property
    def confirmed_employees(self) -> int:
        return sum(1 for e in self.employees if e["days"])

    @property
    def total_confirmations(self) -> int:
        return sum(len(e["days"]) for e in self.employees)

    def confirmations_for_day(self, day: Any) -> int:
        canonical = to_canonical(day)
        return sum(1 for e in self.employees if canonical in e["days"])

    def confirmations_by_day(self) -> Dict[str, int]:
        return {day: self.confirmations_for_day(day) for day in DAYS_CANONICAL}

    def estimated_savings(self, meal_cost: float) -> float:
        """Cost of the meal slots nobody confirmed, i.e. food that is not prepared."""
        if not self.employees:
            return 0
        unconfirmed = len(self.employees) * len(DAYS_CANONICAL) - self.total_confirmations
        return unconfirmed * meal_cost

    def accuracy(self, attendance: List[Dict[str, Any]]) -> float:
        """Percentage (0-100) of employee/day pairs where confirmation matched attendance.

        `attendance` entries look like {'employeeId': ..., 'attended': {'lunes': True, ...}};
        attended day keys may use either spelling.
        """
        if not attendance or not self.employees:
            return 0
        records = {a.get("employeeId"): a for a in attendance if isinstance(a, dict)}
        correct = total = 0
        for emp in self.employees:
            record = records.get(emp["id"])
            if not record:
                continue
            attended = {to_canonical(k): bool(v) for k, v in (record.get("attended") or {}).items()}
            for day in DAYS_CANONICAL:
                if (day in emp["days"]) == attended.get(day, False):
                    correct += 1
                total += 1
        return (correct / total) * 100 if total else 0

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        ts = d.get("timestamp")
        if ts and not isinstance(ts, datetime):
            try:
                ts = datetime.fromisoformat(str(ts))
            except ValueError:
                ts = None
        return Confirmation(
            d.get("week_id") or d.get("weekId") or "",
            d.get("branch_id") or d.get("branchId") or "",
            coordinator_id=d.get("coordinator_id") or d.get("coordinatorId"),
            employees=d.get("employees") or [],
            timestamp=ts,
        )

    def to_dict(self):
        return {
            "week_id": self.week_id,
            "branch_id": self.branch_id,
            "coordinator_id": self.coordinator_id,
            "timestamp": self.timestamp.isoformat(timespec="seconds") if isinstance(self.timestamp, datetime) else self.timestamp,
            "employees": [dict(e, days=list(e["days"])) for e in self.employees],
        }

    def __str__(self) -> str:
        return f"Confirmation {self.key} - {self.confirmed_employees}/{self.total_employees} empleados"

    __repr__ = __str__
