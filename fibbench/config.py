import os
import logging
from pathlib import Path
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_ENV = "test"
DEFAULT_LOG_LEVEL = "WARNING"


# .env.<ENVIRONMENT> in FIBBENCH_ENV_DIR, else the working directory
def env_file() -> Path:
    base = Path(os.getenv("FIBBENCH_ENV_DIR") or Path.cwd())
    return base / f".env.{os.getenv('ENVIRONMENT', DEFAULT_ENV)}"

# Return value type: str (the active environment name)
def load_env() -> str:
    path = env_file()
    if path.exists():
        load_dotenv(path)
        logger.debug("loaded %s", path)
    return os.getenv("ENVIRONMENT", DEFAULT_ENV)


def log_level() -> int:
    name = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("unknown LOG_LEVEL %r, using %s", name, DEFAULT_LOG_LEVEL)
        return logging.WARNING
    return level
