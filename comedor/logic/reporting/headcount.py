"""Headcount aggregation over branch confirmations."""
from collections import defaultdict
from datetime import timedelta
from typing import Any, Dict, Iterable, Optional

from comedor.logic.days import InvalidDate, monday_of
from comedor.utilities.constants import DAYS_CANONICAL, DAYS_DISPLAY, DATE_DISPLAY_FORMAT


def compute_week_headcount(confirmations: Iterable[Any], week_start: Optional[str] = None,
                           meal_cost: float = 0) -> Dict[str, Any]:
    """Aggregate per-day and per-branch confirmation counts for one week.

    Returns structure:
    {
      'days': {
         'lunes': {'name': 'Lunes', 'date': 'dd/mm/yyyy' | None, 'count': int},
         ...
      },
      'branches': { '<branch_id>': {'employees': int, 'confirmed': int, 'confirmations': int}, ... },
      'totals': {'employees': int, 'confirmed': int, 'confirmations': int, 'estimated_savings': float}
    }
    """
    monday = None
    if week_start:
        try:
            monday = monday_of(week_start)
        except InvalidDate:
            monday = None

    day_counts = defaultdict(int)
    branches: Dict[str, Dict[str, int]] = {}
    totals = defaultdict(int)
    savings = 0

    for conf in confirmations or []:
        by_day = conf.confirmations_by_day()
        for day, count in by_day.items():
            day_counts[day] += count
        branch = branches.setdefault(conf.branch_id, {'employees': 0, 'confirmed': 0, 'confirmations': 0})
        branch['employees'] += conf.total_employees
        branch['confirmed'] += conf.confirmed_employees
        branch['confirmations'] += conf.total_confirmations
        totals['employees'] += conf.total_employees
        totals['confirmed'] += conf.confirmed_employees
        totals['confirmations'] += conf.total_confirmations
        savings += conf.estimated_savings(meal_cost)

    days_result = {}
    for i, (canonical, display) in enumerate(zip(DAYS_CANONICAL, DAYS_DISPLAY)):
        days_result[canonical] = {
            'name': display,
            'date': (monday + timedelta(days=i)).strftime(DATE_DISPLAY_FORMAT) if monday else None,
            'count': day_counts[canonical],
        }

    return {
        'days': days_result,
        'branches': branches,
        'totals': {
            'employees': totals['employees'],
            'confirmed': totals['confirmed'],
            'confirmations': totals['confirmations'],
            'estimated_savings': savings,
        }
    }

__all__ = ["compute_week_headcount"]
