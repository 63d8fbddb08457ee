"""Employee domain entity: name, branch, position, email, active flag."""
import re
from typing import List, Optional
from uuid import uuid4

from comedor.utilities.constants import ACTIVE_VALUES, INACTIVE_VALUES
from comedor.utilities.text import normalize_text

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def _stored_active(value) -> bool:
    if value is None or isinstance(value, bool):
        return value is not False
    flag = normalize_text(value)
    if flag in INACTIVE_VALUES:
        return False
    if flag in ACTIVE_VALUES:
        return True
    return bool(value)


class Employee:
    def __init__(self, name: str = "", branch_id: str = "", position: str = "",
                 email: str = "", active: bool = True, id: Optional[str] = None):
        self.id = id or uuid4().hex
        self.name = (name or "").strip()
        self.branch_id = branch_id
        self.position = (position or "").strip()
        self.email = (email or "").strip().lower()
        self.active = active

    def validate(self) -> List[str]:
        errors = []
        if not self.name:
            errors.append("El nombre del empleado es requerido.")
        if self.email and not EMAIL_PATTERN.match(self.email):
            errors.append("Por favor ingrese un email válido.")
        if not self.branch_id:
            errors.append("La sucursal es requerida.")
        return errors

    def __str__(self) -> str:
        state = "activo" if self.active else "inactivo"
        parts = [f"{self.name} ({state})"]
        if self.position:
            parts.append(self.position)
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Employee object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        if "branchId" in d and "branch_id" not in d:
            d["branch_id"] = d["branchId"]
        allowed = {"id", "name", "branch_id", "position", "email", "active"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered["active"] = _stored_active(filtered.get("active"))
        return Employee(**filtered)

    def to_dict(self):
        '''Converts the Employee object to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "branch_id": self.branch_id,
            "position": self.position,
            "email": self.email,
            "active": self.active,
        }
