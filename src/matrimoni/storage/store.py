import json
import logging
import re
from pathlib import Path
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r'^[A-Za-z0-9_-]+$')


class KeyValueStore:
    """
    persistent key-value storage backed by one JSON file per key.

    reads never raise for a valid key: an unset key, an unreadable file and
    malformed JSON all come back as None. invalid key names raise ValueError.
    """

    def __init__(self, root: Path):
        self.root = root

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.fullmatch(key):
            raise ValueError(f"Invalid storage key '{key}'")
        return self.root / f"{key}.json"

    def get(self, key: str) -> Optional[Any]:
        """load the value stored under key, None if absent or corrupted."""
        path = self._path(key)
        if not path.exists():
            return None

        try:
            with open(path, 'r') as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"discarding malformed value for '{key}': {e}")
            return None
        except OSError as e:
            logger.warning(f"could not read '{key}': {e}")
            return None

    def set(self, key: str, value: Any) -> None:
        """
        store value under key, replacing whatever was there.

        unlike reads, writes are not absorbed: a full disk or an unwritable
        data directory surfaces to the caller.

        raises:
            ValueError: if key is not a valid storage key
            OSError: if the file cannot be written
            TypeError: if value is not JSON serializable
        """
        path = self._path(key)
        # ensure storage directory exists
        self.root.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(value, f, indent=2)

    def remove(self, key: str) -> None:
        """delete key; missing keys are ignored."""
        self._path(key).unlink(missing_ok=True)

    def keys(self) -> List[str]:
        if not self.root.exists():
            return []
        return sorted(
            p.stem for p in self.root.glob("*.json")
            if _KEY_PATTERN.fullmatch(p.stem)
        )

    def clear(self) -> None:
        """remove every stored key."""
        for key in self.keys():
            self.remove(key)
