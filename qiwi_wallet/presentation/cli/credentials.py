"""On-disk credentials for the command-line front end."""

import os
from pathlib import Path

import structlog
from pydantic import ValidationError

from qiwi_wallet.core.config import Credentials

logger = structlog.get_logger(__name__)

APP_DIR = "qiwi-cli"
CONFIG_FILE = "config.env"


def config_location() -> Path:
    """``$XDG_CONFIG_HOME/qiwi-cli/config.env``, falling back to ``~/.config``."""
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / APP_DIR / CONFIG_FILE


def load_credentials(path: Path | None = None) -> Credentials | None:
    """Load stored credentials, or None if there are none usable."""
    path = path or config_location()
    if not path.is_file():
        return None

    try:
        return Credentials(_env_file=path)
    except ValidationError as e:
        logger.warning("credentials_invalid", path=str(path), errors=e.error_count())
        return None


def save_credentials(phone: str, token: str, path: Path | None = None) -> Path:
    """Write credentials readable only by the current user."""
    path = path or config_location()
    path.parent.mkdir(parents=True, exist_ok=True)

    content = f"QIWI_PHONE={phone}\nQIWI_TOKEN={token}\n"
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(content)

    logger.info("credentials_saved", path=str(path))
    return path
