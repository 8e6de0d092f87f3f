"""JSON-file backed task store.

Keeps the working set in memory (see ``InMemoryTaskStore``) and rewrites
the whole file after every mutating call. The file layout is::

    {"tasks": [{"id": "...", "title": "...", "isDeleted": false, ...}]}

Before each call the store checks whether the file was replaced since it
last read or wrote it (another ``taskboard`` process, for example) and
reloads it if so. There is no file lock: two processes writing within the
same instant can still lose one of the writes.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from taskboard.domain.shared.result import Err, Ok, Result
from taskboard.domain.task import Task

from .base import StoreFailure, StoreFailureKind
from .memory_store import InMemoryTaskStore
from .task_file import FileStamp, TaskFile

logger = logging.getLogger(__name__)


def load_tasks(task_file: TaskFile, path: Path) -> Result[list[Task], StoreFailure]:
    """Read and validate the tasks stored in ``path``."""
    records = task_file.read(path)
    if isinstance(records, Err):
        return Err(StoreFailure(StoreFailureKind.FAILURE, records.error))
    try:
        return Ok([Task.model_validate(record) for record in records.value])
    except ValidationError as e:
        return Err(StoreFailure(StoreFailureKind.FAILURE, f"Invalid task data in {path}: {e}"))


class JsonTaskStore(InMemoryTaskStore):
    """Task store persisted to a single JSON file.

    Use ``JsonTaskStore.open`` rather than the constructor so that a
    corrupt file is reported as an error instead of raising.
    """

    def __init__(
        self,
        path: Path,
        tasks: list[Task] | None = None,
        task_file: TaskFile | None = None,
    ) -> None:
        super().__init__(tasks)
        self._path = Path(path)
        self._file = task_file or TaskFile()
        self._stamp: FileStamp | None = self._file.stamp(self._path)

    @property
    def path(self) -> Path:
        return self._path

    @classmethod
    def open(
        cls,
        path: Path,
        task_file: TaskFile | None = None,
    ) -> Result["JsonTaskStore", StoreFailure]:
        """Load a store from ``path``; a missing file yields an empty store.

        Returns:
            Ok(JsonTaskStore), or Err(StoreFailure) if the file cannot be read
            or holds invalid task data.
        """
        path = Path(path)
        task_file = task_file or TaskFile()

        tasks = load_tasks(task_file, path)
        if isinstance(tasks, Err):
            return tasks

        logger.info(f"Loaded {len(tasks.value)} tasks from {path}")
        return Ok(cls(path, tasks.value, task_file))

    def _refresh(self) -> Result[None, StoreFailure]:
        stamp = self._file.stamp(self._path)
        if stamp == self._stamp:
            return Ok(None)

        tasks = load_tasks(self._file, self._path)
        if isinstance(tasks, Err):
            logger.error(f"Failed to reload task file: {tasks.error.message}")
            return tasks
        self._tasks = {t.id: t for t in tasks.value}
        self._stamp = stamp
        logger.debug(f"Reloaded {len(self._tasks)} tasks from {self._path}")
        return Ok(None)

    def _commit(self) -> Result[None, StoreFailure]:
        records = [t.model_dump(mode="json", by_alias=True) for t in self._tasks.values()]
        saved = self._file.write(self._path, records)
        if isinstance(saved, Err):
            logger.error(f"Failed to write task file: {saved.error}")
            return Err(StoreFailure(StoreFailureKind.FAILURE, saved.error))
        self._stamp = self._file.stamp(self._path)
        return Ok(None)
