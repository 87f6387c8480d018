"""
Persist the user list, read it back from disk and print what was read.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, TextIO
import logging

from backend.domain.users import SEED_USERS, User
from backend.repositories import json_storage

logger = logging.getLogger(__name__)


def round_trip(
    users: Iterable[User] = SEED_USERS,
    path: Path = json_storage.DATA_FILE,
    out: TextIO | None = None,
) -> list[User]:
    """
    Write ``users`` to ``path``, load the file back and print the decoded list.

    Errors from either step propagate untouched; if the write fails nothing is
    printed. Returns the list decoded from disk.
    """
    json_storage.save(users, path)
    loaded = json_storage.load(path)
    logger.debug("round trip through %s returned %d record(s)", path, len(loaded))
    print(loaded, file=out)
    return loaded
