"""State shared by the CLI commands of one invocation."""

import logging

from rich.console import Console

from ..config import Settings
from ..core.models import TransitSnapshot
from ..data.store import TransitDataStore

logger = logging.getLogger(__name__)

error_console = Console(stderr=True)


class CliState:
    """Settings plus the snapshot, loaded on first use."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._snapshot: TransitSnapshot | None = None

    @property
    def snapshot(self) -> TransitSnapshot:
        if self._snapshot is None:
            store = TransitDataStore(
                self.settings.data_source, timeout=self.settings.timeout
            )
            self._snapshot = store.load_snapshot()
            if self._snapshot.load_failed:
                error_console.print(
                    "[yellow]Could not load:[/yellow] "
                    + ", ".join(self._snapshot.failed_sources)
                    + f" from {self.settings.data_source} "
                    "(set --data-source or ISLAND_TRANSIT_DATA_SOURCE)"
                )
        return self._snapshot
