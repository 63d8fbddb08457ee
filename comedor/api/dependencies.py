"""
API dependencies for dependency injection.

Tests swap the data directory with `app.dependency_overrides[get_data_dir]`.
"""
from pathlib import Path
from typing import Optional

from fastapi import Depends, Header, HTTPException

from comedor.infra.Confirmation_Repository import ConfirmationRepository
from comedor.infra.Employee_Repository import EmployeeRepository
from comedor.infra.Menu_Repository import MenuRepository
from comedor.infra.session import SessionContext
from comedor.logic.days import InvalidDate
from comedor.utilities.config import DATA_DIR


def get_data_dir() -> Path:
    return DATA_DIR


def get_menu_repo(data_dir: Path = Depends(get_data_dir)) -> MenuRepository:
    return MenuRepository(data_dir)


def get_confirmation_repo(data_dir: Path = Depends(get_data_dir)) -> ConfirmationRepository:
    return ConfirmationRepository(data_dir)


def get_employee_repo(data_dir: Path = Depends(get_data_dir)) -> EmployeeRepository:
    return EmployeeRepository(data_dir)


def get_session(
    x_user_id: Optional[str] = Header(default=None),
    x_user_role: Optional[str] = Header(default=None),
    x_branch_id: Optional[str] = Header(default=None),
) -> SessionContext:
    """Build the caller's session context from request headers.

    Usage:
        @router.get("/example")
        def example(session: SessionContext = Depends(get_session)):
            ...
    """
    try:
        return SessionContext(user_id=x_user_id, role=x_user_role, branch_id=x_branch_id)
    except (ValueError, InvalidDate) as e:
        raise HTTPException(status_code=400, detail=str(e))
