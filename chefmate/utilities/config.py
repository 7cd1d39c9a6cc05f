"""Configuration management for the ChefMate application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Local language model (Ollama)
OLLAMA_HOST: Final[str] = os.getenv('OLLAMA_HOST', 'http://127.0.0.1:11434').rstrip('/')
DEFAULT_MODEL: Final[str] = os.getenv('DEFAULT_MODEL', 'llama3.2')
DEFAULT_TEMPERATURE: Final[float] = float(os.getenv('DEFAULT_TEMPERATURE', '0.7'))
DEFAULT_SYSTEM_PROMPT: Final[str] = os.getenv(
    'DEFAULT_SYSTEM_PROMPT',
    'You are a helpful cooking assistant. You provide accurate, clear advice '
    'about cooking, recipes, and food preparation.'
)
OLLAMA_TIMEOUT: Final[float] = float(os.getenv('OLLAMA_TIMEOUT', '120'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('CHEFMATE_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'
