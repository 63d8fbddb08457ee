from pathlib import Path
from typing import Optional

from comedor.utilities.config import DATA_DIR

# Centralized data file names (single source of truth)
MENUS_FILENAME = 'menus.json'
CONFIRMATIONS_FILENAME = 'confirmations.json'
EMPLOYEES_FILENAME = 'employees.json'
SESSION_FILENAME = 'session.json'


def data_file(filename: str, data_dir: Optional[Path] = None) -> Path:
    return Path(data_dir or DATA_DIR) / filename

__all__ = ['DATA_DIR', 'MENUS_FILENAME', 'CONFIRMATIONS_FILENAME', 'EMPLOYEES_FILENAME',
           'SESSION_FILENAME', 'data_file']
