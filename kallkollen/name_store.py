"""Remember the participant's name between sessions in a small JSON file."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)

NAME_KEY = "kallkollen_name"


class NameStore:
    """Key/value file holding the name printed on the certificate."""

    def __init__(self, path: Union[Path, str]):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s, starting empty: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> str:
        """Stored name, or "" if nothing has been saved yet."""
        value = self._read_all().get(NAME_KEY, "")
        return value if isinstance(value, str) else ""

    def save(self, name: str) -> None:
        data = self._read_all()
        data[NAME_KEY] = name
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        logger.debug("Saved participant name to %s", self.path)
