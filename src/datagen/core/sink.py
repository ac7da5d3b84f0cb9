from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO

from datagen.core.system import DiskGuard
from datagen.core.table import TableSpec


class BaseSink(ABC):
    """
    Output target for a table. Drives header and row production and,
    for files, checks free disk space first.
    """

    def __init__(self, destination: Optional[Path] = None, validate_disk_space: bool = True,
                 stream: Optional[TextIO] = None):
        self.destination = Path(destination) if destination is not None else None
        self.validate_disk_space = validate_disk_space
        self.stream = stream

    def estimated_row_bytes(self, table: TableSpec) -> int:
        # Fixed-length text columns dominate; everything else is small
        total = len(table.delimiter) * max(len(table) - 1, 0) + 1
        for column in table.columns:
            limit = getattr(column.generator, "length_limit", None)
            total += limit if limit is not None else 12
        return total

    def validate_space(self, table: TableSpec, rows: int) -> bool:
        """
        Validación 'Just-in-Time' antes de escribir.
        """
        if not self.validate_disk_space or self.destination is None:
            return True
        estimated = DiskGuard.estimate_size(rows, self.estimated_row_bytes(table))
        return DiskGuard.check_space(
            estimated, path=str(DiskGuard.nearest_existing(self.destination.parent)))

    @abstractmethod
    def write(self, table: TableSpec, rows: int) -> int:
        """
        Writes the header and `rows` data rows. Returns the data rows written.
        Nothing is written when rows <= 0.
        """
        pass
