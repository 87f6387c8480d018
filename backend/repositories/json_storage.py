"""
JSON file persistence for user records.

The file lives at a fixed path relative to the working directory. Writes
replace the whole document; the parent directory is never created here, so a
missing ``backend/`` folder surfaces as FileNotFoundError to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
import json
import logging

from backend.domain.users import User

logger = logging.getLogger(__name__)

DATA_FILE = Path("backend") / "users.json"


def dumps(users: Iterable[User]) -> str:
    return json.dumps(
        [u.to_dict() for u in users],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def loads(text: str) -> list[User]:
    return [User.from_dict(item) for item in json.loads(text)]


def save(users: Iterable[User], path: Path = DATA_FILE) -> Path:
    """Encode ``users`` and overwrite ``path`` with the result."""
    payload = dumps(users)
    path.write_text(payload, encoding="utf-8")
    logger.debug("wrote %d bytes to %s", len(payload.encode("utf-8")), path)
    return path


def load(path: Path = DATA_FILE) -> list[User]:
    """Read ``path`` in full and decode it into User records."""
    users = loads(path.read_text(encoding="utf-8"))
    logger.debug("loaded %d user(s) from %s", len(users), path)
    return users
