import sys
from pathlib import Path
from typing import Optional, TextIO

from datagen.core.sink import BaseSink
from datagen.core.table import TableSpec


class TextSink(BaseSink):
    def write(self, table: TableSpec, rows: int) -> int:
        if rows <= 0:
            return 0

        if self.destination is None:
            stream = self.stream if self.stream is not None else sys.stdout
            return self._write_lines(stream, table, rows)

        if not self.validate_space(table, rows):
            raise OSError(
                f"Insufficient disk space to write {rows:,} rows to {self.destination}")

        self.destination.parent.mkdir(parents=True, exist_ok=True)
        with open(self.destination, "w", encoding="utf-8", newline="") as f:
            return self._write_lines(f, table, rows)

    @staticmethod
    def _write_lines(stream: TextIO, table: TableSpec, rows: int) -> int:
        stream.write(table.header() + "\n")
        count = 0
        for line in table.rows(rows):
            stream.write(line + "\n")
            count += 1
        return count


class ParquetSink(BaseSink):
    def write(self, table: TableSpec, rows: int) -> int:
        if rows <= 0:
            return 0

        if self.destination is None:
            raise ValueError("Parquet output needs a file destination (--output)")

        if not self.validate_space(table, rows):
            raise OSError(
                f"Insufficient disk space to write {rows:,} rows to {self.destination}")

        df = table.to_frame(rows)
        self.destination.parent.mkdir(parents=True, exist_ok=True)
        df.write_parquet(self.destination)
        return df.height


class SinkFactory:
    @staticmethod
    def get_sink(format: str, destination: Optional[Path] = None,
                 validate_disk_space: bool = True, stream: Optional[TextIO] = None) -> BaseSink:
        if format == "text":
            return TextSink(destination, validate_disk_space, stream)
        elif format == "parquet":
            return ParquetSink(destination, validate_disk_space)
        else:
            raise ValueError(f"Unknown output format: {format}")
