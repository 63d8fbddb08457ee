import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException

from comedor.api.dependencies import get_confirmation_repo, get_menu_repo, get_session
from comedor.domain.Confirmation import ConfirmationError
from comedor.domain.Menu import WeeklyMenu
from comedor.infra.Confirmation_Repository import ConfirmationRepository
from comedor.infra.Menu_Repository import MenuRepository
from comedor.infra.session import SessionContext
from comedor.logic.days import InvalidDate, week_id
from comedor.logic.reporting.headcount import compute_week_headcount
from comedor.utilities.config import CONFIRMATION_WINDOW, ENFORCE_CONFIRMATION_WINDOW, MEAL_COST
from comedor.utilities.validators import ConfirmationInput

router = APIRouter(prefix="/api/confirmations", tags=["confirmations"])
logger = logging.getLogger(__name__)


def _week(week_start: str) -> str:
    try:
        return week_id(week_start)
    except InvalidDate as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{week_start}")
def week_summary(week_start: str, repo: ConfirmationRepository = Depends(get_confirmation_repo)):
    """Headcount for every branch that confirmed the given week."""
    week = _week(week_start)
    summary = compute_week_headcount(repo.list_for_week(week), week_start=week, meal_cost=MEAL_COST)
    return {"week_id": week, **summary}


@router.get("/{week_start}/{branch_id}")
def get_confirmation(week_start: str, branch_id: str,
                     repo: ConfirmationRepository = Depends(get_confirmation_repo)):
    conf = repo.get(_week(week_start), branch_id)
    return {**conf.to_dict(), "by_day": conf.confirmations_by_day()}


@router.put("/{week_start}/{branch_id}")
def save_confirmation(week_start: str, branch_id: str, payload: ConfirmationInput,
                      repo: ConfirmationRepository = Depends(get_confirmation_repo),
                      menus: MenuRepository = Depends(get_menu_repo),
                      session: SessionContext = Depends(get_session)):
    week = _week(week_start)
    if session.branch_id and session.is_coordinator and session.branch_id != branch_id:
        raise HTTPException(status_code=403, detail="Coordinator can only confirm for their own branch")
    if ENFORCE_CONFIRMATION_WINDOW:
        menu: WeeklyMenu = menus.get_week_menu(week)
        if not menu.is_confirmation_open(CONFIRMATION_WINDOW, now=datetime.now()):
            raise HTTPException(status_code=409, detail="El periodo de confirmación no está activo.")

    conf = repo.get(week, branch_id)
    conf.coordinator_id = session.user_id or conf.coordinator_id
    try:
        conf.employees = []
        for emp in payload.employees:
            conf.update_employee(emp.id, emp.name, emp.days)
    except ConfirmationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    repo.save(conf)
    return {**conf.to_dict(), "by_day": conf.confirmations_by_day()}
