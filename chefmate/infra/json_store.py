"""JSON file helpers shared by the repositories: tolerant reads, atomic writes.

Repositories hold `store_lock` across a load, change and write so concurrent
saves in one process do not overwrite each other.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import RLock
from typing import Any

logger = logging.getLogger(__name__)

store_lock = RLock()


def load_json(path: Path, default: Any):
    """Read a JSON document; a missing, unreadable or wrongly-typed file yields `default`."""
    if not os.path.exists(path):
        return default
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", path, e)
        return default
    except OSError as e:
        logger.error("Could not read %s: %s", path, e)
        return default
    if not isinstance(data, type(default)):
        logger.warning("Unexpected content in %s (expected %s); ignoring it.", path, type(default).__name__)
        return default
    return data


def atomic_write(path: Path, data: Any) -> None:
    """Write JSON to a temp file in the same directory, then move it over `path`."""
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".chefmate_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


__all__ = ['load_json', 'atomic_write', 'store_lock']
