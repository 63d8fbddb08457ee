"""Explicit session context.

Holds who is using the application (user, role, branch) and the week being
worked on. It is created by the caller and handed to whatever needs it;
nothing reads it from module globals. `save`/`load` are the only way it
touches disk.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional

from comedor.infra.json_store import load_json, atomic_write
from comedor.logic.days import week_id
from comedor.utilities.constants import USER_ROLES

logger = logging.getLogger(__name__)

_FIELDS = ("user_id", "role", "branch_id", "current_week")


@dataclass
class SessionContext:
    user_id: Optional[str] = None
    role: Optional[str] = None
    branch_id: Optional[str] = None
    current_week: Optional[str] = None
    _subscribers: List[Callable[[str, Any], None]] = field(default_factory=list, repr=False, compare=False)

    def __post_init__(self):
        self._check(self.role, self.current_week)
        if self.current_week:
            self.current_week = week_id(self.current_week)

    @staticmethod
    def _check(role, current_week):
        if role is not None and role not in USER_ROLES:
            raise ValueError(f"Unknown role: {role!r}")
        if current_week:
            week_id(current_week)  # raises InvalidDate

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @property
    def is_coordinator(self) -> bool:
        return self.role == "coordinator"

    def subscribe(self, callback: Callable[[str, Any], None]) -> Callable[[], None]:
        """Register `callback(field_name, new_value)`; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def _unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)
        return _unsubscribe

    def update(self, **changes) -> None:
        unknown = set(changes) - set(_FIELDS)
        if unknown:
            raise ValueError(f"Unknown session fields: {sorted(unknown)}")
        self._check(changes.get("role", self.role), changes.get("current_week"))
        if changes.get("current_week"):
            changes["current_week"] = week_id(changes["current_week"])
        for name, value in changes.items():
            if getattr(self, name) == value:
                continue
            setattr(self, name, value)
            for cb in list(self._subscribers):
                cb(name, value)

    def clear(self) -> None:
        self.update(**{name: None for name in _FIELDS})

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in _FIELDS}

    def save(self, path: Path) -> None:
        atomic_write(path, self.to_dict())
        logger.debug("Session saved to %s", path)

    @classmethod
    def load(cls, path: Path) -> "SessionContext":
        data = load_json(path, {})
        if not isinstance(data, dict):
            data = {}
        return cls(**{k: data.get(k) for k in _FIELDS})
