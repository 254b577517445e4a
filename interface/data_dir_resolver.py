from pathlib import Path
import os

from config import get_data_dir as _configured_data_dir

DEFAULT_DATA_DIR = Path.home() / ".payback" / "data"


def get_data_dir(data_dir: Path | str | None = None, create: bool = True) -> Path:
    """Unified resolver for the person data directory.

    Priority:
    1. PAYBACK_DATA_DIR env variable (for tests).
    2. Explicit data_dir if provided (--data-dir).
    3. data_dir from the user config file.
    4. ~/.payback/data.
    """
    env_dir = os.environ.get("PAYBACK_DATA_DIR")
    if env_dir:
        resolved = Path(env_dir).expanduser().resolve()
    elif data_dir:
        resolved = Path(data_dir).expanduser().resolve()
    else:
        configured = _configured_data_dir()
        resolved = Path(configured).expanduser().resolve() if configured else DEFAULT_DATA_DIR
    if create:
        resolved.mkdir(parents=True, exist_ok=True)
    return resolved


__all__ = ["get_data_dir", "DEFAULT_DATA_DIR"]
