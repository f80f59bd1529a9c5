"""Configuration management for the event menu service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Supabase (PostgREST) connection
SUPABASE_URL: Final[str] = os.getenv('SUPABASE_URL', '')
SUPABASE_KEY: Final[str] = os.getenv('SUPABASE_SERVICE_ROLE_KEY', os.getenv('SUPABASE_KEY', ''))
SUPABASE_TIMEOUT: Final[float] = float(os.getenv('SUPABASE_TIMEOUT', '10'))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
