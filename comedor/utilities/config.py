"""Configuration management for the Comedor application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Cost of one served meal, used for savings estimates
MEAL_COST: Final[float] = float(os.getenv('MEAL_COST', '50'))

# Confirmation window (relative to the Monday of the confirmed week)
ENFORCE_CONFIRMATION_WINDOW: Final[bool] = os.getenv('ENFORCE_CONFIRMATION_WINDOW', 'False').lower() == 'true'
CONFIRMATION_WINDOW: Final[dict] = {
    "start_day": os.getenv('CONFIRM_START_DAY', 'jueves'),
    "start_hour": float(os.getenv('CONFIRM_START_HOUR', '16.17')),  # 16:10
    "end_day": os.getenv('CONFIRM_END_DAY', 'sabado'),
    "end_hour": float(os.getenv('CONFIRM_END_HOUR', '10')),
}

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('COMEDOR_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
