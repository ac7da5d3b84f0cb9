from typing import Iterator, List, Optional, Tuple

import polars as pl

from datagen.core.generator import ValueGenerator


class ColumnSpec:
    """
    A named field of the output table.
    The type label is descriptive only; values come from the attached
    generator, or are blank when there is none.
    """

    def __init__(self, name: str, type_label: str,
                 generator: Optional[ValueGenerator] = None):
        if not name:
            raise ValueError("Column name must not be empty")
        self._name = name
        self._type_label = type_label
        self._generator = generator

    @property
    def name(self) -> str:
        return self._name

    @property
    def type_label(self) -> str:
        return self._type_label

    @property
    def generator(self) -> Optional[ValueGenerator]:
        return self._generator

    def attach_generator(self, generator: ValueGenerator) -> None:
        # A second attach replaces the previous generator
        self._generator = generator

    def describe(self) -> str:
        label = f"{self._name}({self._type_label})"
        if self._generator is not None:
            label += f"<{self._generator.describe()}>"
        return label

    def produce_next(self) -> str:
        if self._generator is None:
            return ""
        return self._generator.produce_next()


class TableSpec:
    """
    Ordered columns plus the delimiter placed between adjacent fields.
    header() and next_row() walk the columns in insertion order, so fields
    always line up positionally.
    """

    def __init__(self, delimiter: str = ","):
        self._columns: List[ColumnSpec] = []
        self._delimiter = delimiter

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def columns(self) -> Tuple[ColumnSpec, ...]:
        return tuple(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def set_delimiter(self, delimiter: str) -> None:
        self._delimiter = delimiter

    def add_column(self, column: ColumnSpec) -> None:
        self._columns.append(column)

    def header(self) -> str:
        return self._delimiter.join(c.name for c in self._columns)

    def next_row(self) -> str:
        return self._delimiter.join(c.produce_next() for c in self._columns)

    def rows(self, count: int) -> Iterator[str]:
        for _ in range(count):
            yield self.next_row()

    def describe(self) -> str:
        return "".join("{" + c.describe() + "}\n" for c in self._columns)

    def to_frame(self, count: int) -> pl.DataFrame:
        """
        Materializa `count` filas en un DataFrame de Polars (todas String).
        Los valores se generan fila por fila para que el estado de cada
        generador avance igual que en la salida de texto.
        """
        names = [c.name for c in self._columns]
        if len(set(names)) != len(names):
            raise ValueError(
                "Columnar output needs unique column names: " + ", ".join(names))

        data = {name: [] for name in names}
        for _ in range(max(count, 0)):
            for name, column in zip(names, self._columns):
                data[name].append(column.produce_next())

        return pl.DataFrame(
            data,
            schema={name: pl.String for name in names},
        )
