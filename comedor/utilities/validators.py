"""
Input validation schemas using Pydantic for request bodies.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional

from comedor.utilities.constants import MENU_STATUS_TEXT


class DayMenuInput(BaseModel):
    """Schema for one day of a weekly menu. Extra fields are kept."""
    model_config = {"extra": "allow"}

    items: List[Any] = Field(default_factory=list)

    @field_validator('items', mode='before')
    @classmethod
    def default_items(cls, v):
        """Treat a null items list as empty."""
        return [] if v is None else v


class WeeklyMenuInput(BaseModel):
    """Schema for a weekly menu update; day keys may use either spelling."""
    days: Dict[str, DayMenuInput] = Field(default_factory=dict)
    status: Optional[str] = None

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        if v is not None and v not in MENU_STATUS_TEXT:
            raise ValueError(f"Unknown menu status: {v}")
        return v


class ConfirmedEmployeeInput(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = ""
    days: List[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()


class ConfirmationInput(BaseModel):
    """Schema for a branch confirmation update."""
    employees: List[ConfirmedEmployeeInput] = Field(default_factory=list)


class EmployeeInput(BaseModel):
    """Schema for a manually created employee."""
    name: str = Field(..., min_length=1, max_length=200)
    position: str = ""
    email: str = ""
    active: bool = True

    @field_validator('name', 'position', 'email')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip() if isinstance(v, str) else v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v:
            raise ValueError('El nombre del empleado es requerido.')
        return v
