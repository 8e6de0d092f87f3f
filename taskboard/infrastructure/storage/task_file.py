"""On-disk format of the JSON task store.

A task file is a single JSON object::

    {"tasks": [{"id": "...", "title": "...", "isDeleted": false, ...}]}

``TaskFile`` reads and writes the ``tasks`` list as plain records. It knows
nothing about the Task model; ``JsonTaskStore`` validates the records.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from taskboard.domain.shared.result import Err, Ok, Result

TASKS_KEY = "tasks"

Record = dict[str, Any]

# (inode, mtime in ns, size) of a task file
FileStamp = tuple[int, int, int]


class TaskFile:
    """Reads and writes task records, reporting I/O problems as ``Err(str)``.

    Writes go to a temporary file in the same directory which then replaces
    the target, so a crash never leaves a truncated task file behind.
    """

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def stamp(self, path: Path) -> FileStamp | None:
        """Identify the current version of ``path``, or None if it is missing."""
        try:
            st = path.stat()
        except OSError:
            return None
        return (st.st_ino, st.st_mtime_ns, st.st_size)

    def read(self, path: Path) -> Result[list[Record], str]:
        """Read the records stored in ``path``. A missing file holds no records."""
        if not path.exists():
            return Ok([])
        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")

        if not isinstance(document, dict):
            return Err(f"Expected a JSON object in {path}")
        records = document.get(TASKS_KEY, [])
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            return Err(f"Expected a list of task objects under '{TASKS_KEY}' in {path}")
        return Ok(records)

    def write(self, path: Path, records: list[Record]) -> Result[None, str]:
        """Replace the contents of ``path`` with ``records``."""
        try:
            content = json.dumps({TASKS_KEY: records}, indent=self.indent)
        except (TypeError, ValueError) as e:
            return Err(f"Task data not JSON serializable: {e}")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
        except PermissionError:
            return Err(f"Permission denied writing {path}")
        except OSError as e:
            return Err(f"Error writing {path}: {e}")

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(content)
            os.replace(tmp_name, path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            return Err(f"Error writing {path}: {e}")
        return Ok(None)
