from fastapi import FastAPI, Query, HTTPException, Response, Depends

from typing import Optional
import logging

from comedor.api.dependencies import get_menu_repo, get_session
from comedor.api.routes import confirmations, employees
from comedor.domain.Menu import MenuError, WeeklyMenu
from comedor.infra.Menu_Repository import MenuRepository
from comedor.infra.pdf_utils import generate_pdf_for_menu
from comedor.infra.session import SessionContext
from comedor.logic.days import InvalidDate, is_canonical_day, to_canonical, to_display, week_id, week_range
from comedor.utilities.config import CONFIRMATION_WINDOW
from comedor.utilities.constants import DAYS_CANONICAL, DAYS_DISPLAY
from comedor.utilities.validators import WeeklyMenuInput

# Logging
logger = logging.getLogger("comedor_app")

# Initialize FastAPI app
app = FastAPI(title="Comedor: Weekly Menus & Confirmations API")

# Include routers
app.include_router(confirmations.router)
app.include_router(employees.router)


def _week_or_400(week_start: str) -> str:
    try:
        return week_id(week_start)
    except InvalidDate as e:
        raise HTTPException(status_code=400, detail=str(e))


def _menu_payload(menu: WeeklyMenu) -> dict:
    data = menu.to_dict()
    data["status_text"] = menu.status_text
    data["range"] = week_range(menu.week_start)
    window = menu.confirmation_window(menu.week_start, CONFIRMATION_WINDOW)
    data["confirmation_window"] = {k: v.isoformat(timespec="minutes") for k, v in window.items()}
    return data


# -------------------- API: Days --------------------

@app.get('/api/days')
def list_days():
    return {"canonical": list(DAYS_CANONICAL), "display": list(DAYS_DISPLAY)}


@app.get('/api/days/normalize')
def normalize_day(day: Optional[str] = Query(default=None)):
    """Convert a day name in either spelling. Unknown names come back unchanged."""
    canonical = to_canonical(day)
    return {
        "input": day,
        "canonical": canonical,
        "display": to_display(day),
        "known": is_canonical_day(canonical),
    }


# -------------------- API: Menus --------------------

@app.get('/api/menus/{week_start}')
def get_menu(week_start: str, repo: MenuRepository = Depends(get_menu_repo)):
    menu = repo.get_week_menu(_week_or_400(week_start))
    return _menu_payload(menu)


@app.put('/api/menus/{week_start}')
def update_menu(week_start: str, payload: WeeklyMenuInput, repo: MenuRepository = Depends(get_menu_repo)):
    """Replace the days present in the body; the others keep their stored items."""
    week = _week_or_400(week_start)
    menu = repo.get_week_menu(week)
    incoming = WeeklyMenu(week, days={k: v.model_dump() for k, v in payload.days.items()})
    sent = {to_canonical(key) for key in payload.days}
    for day in DAYS_CANONICAL:
        if day in sent:
            menu.days[day] = incoming.days[day]
    if payload.status is not None:
        menu.status = payload.status
    repo.save_week_menu(menu)
    logger.info("Menu %s updated (%d days)", week, len(sent & set(DAYS_CANONICAL)))
    return _menu_payload(menu)


@app.post('/api/menus/{week_start}/publish')
def publish_menu(week_start: str, repo: MenuRepository = Depends(get_menu_repo),
                 session: SessionContext = Depends(get_session)):
    week = _week_or_400(week_start)
    if session.role and not session.is_admin:
        raise HTTPException(status_code=403, detail="Only administrators can publish menus")
    try:
        menu = repo.publish_week(week, by=session.user_id)
    except MenuError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _menu_payload(menu)


@app.get('/api/menus/{week_start}/display')
def display_menu(week_start: str, repo: MenuRepository = Depends(get_menu_repo)):
    menu = repo.get_week_menu(_week_or_400(week_start))
    formatted = menu.format_for_display()
    formatted["range"] = week_range(menu.week_start)["display_text"]
    return formatted


@app.get('/api/menus/{week_start}/pdf')
def menu_pdf(week_start: str, repo: MenuRepository = Depends(get_menu_repo)):
    menu = repo.get_week_menu(_week_or_400(week_start))
    pdf = generate_pdf_for_menu(menu)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f"inline; filename=menu_{menu.week_start}.pdf"},
    )
