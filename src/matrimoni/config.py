import os
from pathlib import Path
from typing import Dict, Optional

CONFIG_DIR = Path(os.environ.get("MATRIMONI_HOME", Path.home() / ".matrimoni"))
CONFIG_FILE = CONFIG_DIR / "config"

DATA_DIR_KEY = "MATRIMONI_DATA_DIR"


def _read_config(config_file: Path) -> Dict[str, str]:
    config = {}
    if not config_file.exists():
        return config

    try:
        with open(config_file, "r") as f:
            for line in f:
                line = line.strip()
                if "=" in line:
                    key, value = line.split("=", 1)
                    config[key] = value
    except (IOError, PermissionError, OSError):
        # unreadable config is treated as empty
        return {}
    return config


def get_data_dir(config_file: Optional[Path] = None) -> Path:
    """get the directory holding the stored users, session and biodata."""
    config_file = config_file or CONFIG_FILE
    value = _read_config(config_file).get(DATA_DIR_KEY)
    if value:
        return Path(value).expanduser()
    return config_file.parent / "storage"


def set_data_dir(path: Path, config_file: Optional[Path] = None):
    """set the data directory in config file, preserving other config values."""
    config_file = config_file or CONFIG_FILE
    config_file.parent.mkdir(parents=True, exist_ok=True)

    config = _read_config(config_file)
    config[DATA_DIR_KEY] = str(Path(path).expanduser())

    try:
        with open(config_file, "w") as f:
            for key, value in config.items():
                f.write(f"{key}={value}\n")
    except (IOError, PermissionError, OSError) as e:
        raise RuntimeError(f"failed to write config file: {e}") from e
