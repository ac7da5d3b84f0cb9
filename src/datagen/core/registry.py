from typing import Any, Callable, Dict, List, Optional

from datagen.core.generator import (
    RandomTextGenerator,
    SequenceGenerator,
    ValueGenerator,
)
from datagen.core.random import Randomizer

GeneratorFactory = Callable[[Dict[str, Any], Randomizer], ValueGenerator]


class GeneratorRegistry:
    """
    Central registry of the generator names accepted in a column's
    "data.generator" field.
    """
    _factories: Dict[str, GeneratorFactory] = {}

    @classmethod
    def register(cls, name: str):
        """Decorator to register a generator factory."""
        def decorator(factory):
            cls._factories[name] = factory
            return factory
        return decorator

    @classmethod
    def get_factory(cls, name: str) -> Optional[GeneratorFactory]:
        return cls._factories.get(name)

    @classmethod
    def list_generators(cls) -> List[str]:
        return list(cls._factories.keys())


def require_int(data: Dict[str, Any], key: str) -> int:
    """
    Reads an integer field that may arrive as a JSON number or a numeric
    string. Raises KeyError when missing and ValueError when not numeric.
    """
    raw = data[key]
    if isinstance(raw, bool):
        raise ValueError(f"'{key}' must be an integer, got {raw!r}")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValueError(f"'{key}' must be an integer, got {raw!r}")
    try:
        return int(raw)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValueError(f"'{key}' must be an integer, got {raw!r}") from exc


@GeneratorRegistry.register("sequence")
def build_sequence(data: Dict[str, Any], randomizer: Randomizer) -> ValueGenerator:
    return SequenceGenerator(require_int(data, "seed"))


@GeneratorRegistry.register("random-text")
def build_random_text(data: Dict[str, Any], randomizer: Randomizer) -> ValueGenerator:
    # Anything other than "variable" means fixed length
    mode = str(data.get("length", "fixed"))
    return RandomTextGenerator(mode, require_int(data, "length-limit"), randomizer)
