"""Session state shared between the generator and the front end."""

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from .archive import build_archive, write_archive
from .models import GeneratedImage

logger = logging.getLogger(__name__)


class RunState(Enum):
    """Lifecycle of a generation run."""
    IDLE = "idle"
    RUNNING = "running"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class CancellationToken:
    """Cooperative cancellation flag checked between units."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def reset(self) -> None:
        self._event.clear()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


@dataclass
class RunReport:
    """Summary of a generation run."""
    state: RunState
    requested: int
    completed: int = 0
    failed: int = 0
    errors: List[Dict[str, str]] = field(default_factory=list)
    rejected: bool = False
    warning: Optional[str] = None
    elapsed: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'state': self.state.value,
            'requested': self.requested,
            'completed': self.completed,
            'failed': self.failed,
            'rejected': self.rejected,
            'warning': self.warning,
            'elapsed': round(self.elapsed, 3),
            'errors': self.errors,
        }


class GenerationSession:
    """Ordered in-memory list of generated images plus run flags.

    The generator appends; the front end reads, removes and archives.
    """

    def __init__(self):
        self.items: List[GeneratedImage] = []
        self.state = RunState.IDLE
        self.token = CancellationToken()
        self.last_report: Optional[RunReport] = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[GeneratedImage]:
        return iter(list(self.items))

    def __getitem__(self, index: int) -> GeneratedImage:
        return self.items[index]

    @property
    def is_running(self) -> bool:
        return self.state is RunState.RUNNING

    def append(self, item: GeneratedImage) -> None:
        self.items.append(item)

    def cancel(self) -> None:
        """Request the running generation to stop after the current unit."""
        if self.is_running:
            logger.info("Cancellation requested")
        self.token.cancel()

    def remove(self, index: int) -> GeneratedImage:
        """Remove and return the item at a 0-based position.

        Raises:
            IndexError: If there is no item at ``index``
        """
        if index < 0 or index >= len(self.items):
            raise IndexError(f"No generated image at position {index}")

        item = self.items.pop(index)
        logger.debug(f"Removed {item.name}")
        return item

    def clear(self) -> None:
        self.items.clear()
        logger.debug("Session cleared")

    def total_bytes(self) -> int:
        return sum(item.size for item in self.items)

    def build_archive(self) -> bytes:
        """ZIP of every item currently held."""
        return build_archive(self.items)

    def write_archive(self, path: Union[str, Path]) -> Path:
        return write_archive(self.items, path)

    def write_files(self, directory: Union[str, Path]) -> List[Path]:
        """Save each item under its generated name in ``directory``."""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        written = []
        for item in self.items:
            path = directory / item.name
            with open(path, 'wb') as f:
                f.write(item.data)
            written.append(path)

        logger.info(f"Saved {len(written)} images to: {directory}")
        return written
