from typing import Any, Dict, Optional

from datagen.core.random import Randomizer
from datagen.core.registry import GeneratorRegistry, require_int
from datagen.core.settings import ConfigError
from datagen.core.table import ColumnSpec, TableSpec


class TableBuilder:
    """
    Turns a parsed configuration document into a TableSpec.
    Every problem with the document surfaces as a ConfigError before any
    row is produced.
    """

    def __init__(self, config: Dict[str, Any], randomizer: Optional[Randomizer] = None):
        self.config = config
        self.randomizer = randomizer

    def row_count(self) -> int:
        try:
            return require_int(self.config, "rows")
        except KeyError:
            raise ConfigError("Missing required field 'rows'") from None
        except ValueError as e:
            raise ConfigError(str(e)) from e

    def build(self) -> TableSpec:
        randomizer = self._resolve_randomizer()

        table = TableSpec()
        delimiter = self.config.get("delimiter", ",")
        if not isinstance(delimiter, str):
            raise ConfigError(f"'delimiter' must be a string, got {delimiter!r}")
        table.set_delimiter(delimiter)

        columns = self.config.get("columns")
        if columns is None:
            raise ConfigError("Missing required field 'columns'")
        if not isinstance(columns, list):
            raise ConfigError("'columns' must be a list")

        for idx, entry in enumerate(columns):
            table.add_column(self._build_column(idx, entry, randomizer))

        return table

    def _resolve_randomizer(self) -> Randomizer:
        if self.randomizer is not None:
            return self.randomizer

        if self.config.get("seed") is not None:
            try:
                return Randomizer(seed=require_int(self.config, "seed"))
            except ValueError as e:
                raise ConfigError(str(e)) from e

        return Randomizer.shared()

    def _build_column(self, idx: int, entry: Any, randomizer: Randomizer) -> ColumnSpec:
        where = f"columns[{idx}]"
        if not isinstance(entry, dict):
            raise ConfigError(f"{where} must be a mapping")

        for key in ("name", "type"):
            if key not in entry:
                raise ConfigError(f"{where}: missing required field '{key}'")

        name = str(entry["name"])
        where = f"column '{name}'"
        try:
            column = ColumnSpec(name, str(entry["type"]))
        except ValueError as e:
            raise ConfigError(f"columns[{idx}]: {e}") from e

        data = entry.get("data")
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"{where}: 'data' must be a mapping")

        # Unknown generator names leave the column blank
        generator_name = data.get("generator")
        factory = None
        if isinstance(generator_name, str):
            factory = GeneratorRegistry.get_factory(generator_name)
        if factory is None:
            return column

        try:
            column.attach_generator(factory(data, randomizer))
        except KeyError as e:
            raise ConfigError(
                f"{where}: missing required field 'data.{e.args[0]}'") from e
        except ValueError as e:
            raise ConfigError(f"{where}: {e}") from e

        return column
