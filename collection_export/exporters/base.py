"""Base writer interface."""

import os
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from rich.progress import Progress, TaskID

from collection_export.core.errors import EmptyCollectionError
from collection_export.logger import Logger


class BaseWriter(ABC):
    """Abstract base class for collection writers."""

    #: Description shown on the progress task
    progress_label = "[yellow]Writing records"

    @abstractmethod
    def write(
        self,
        collection: Any,
        filepath: str,
        progress: Optional[Progress] = None
    ) -> str:
        """
        Write a record collection to file.

        Args:
            collection: Iterable of records
            filepath: Full output path, extension included
            progress: Optional progress tracker

        Returns:
            Full path to written file
        """
        pass

    @staticmethod
    def _materialize(collection: Any) -> List[Any]:
        """Snapshot the collection, rejecting an empty one."""
        items = list(collection)
        if not items:
            raise EmptyCollectionError()
        return items

    @staticmethod
    def _discard(filepath: str, error: Exception):
        """Delete a partially written file after a failed write."""
        if os.path.exists(filepath):
            os.remove(filepath)
        Logger.warning("Removed partial export %s: %s", filepath, error)

    def _start_task(self, progress: Optional[Progress], total: int) -> Optional[TaskID]:
        if progress is None:
            return None
        return progress.add_task(self.progress_label, total=total)

    @staticmethod
    def _advance(progress: Optional[Progress], task: Optional[TaskID]):
        if progress is not None and task is not None:
            progress.advance(task)

    @staticmethod
    def _finish_task(progress: Optional[Progress], task: Optional[TaskID]):
        if progress is not None and task is not None:
            progress.remove_task(task)
