r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from dynarr import List, from_iterable
from typing import Any, Dict, Optional, Sequence


class Generator:
    """seeded source of random fixtures: numpy for numbers, faker for text."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    # --- numbers ---

    def integers(self, count: int, low: int = 0, high: int = 100) -> np.ndarray:
        """count integers in [low, high], both ends included"""
        return self._rng.integers(low, high, size=count, endpoint=True)

    def floats(self, count: int, low: float = 0.0, high: float = 1.0) -> np.ndarray:
        return self._rng.uniform(low, high, size=count)

    def index(self, upper: int) -> int:
        """a random index in [0, upper)"""
        return int(self._rng.integers(0, upper))

    def shuffled(self, values: Sequence[Any]) -> list:
        return [values[i] for i in self._rng.permutation(len(values))]

    # --- text and records ---

    def words(self, count: int) -> list:
        return [self._fake.word() for _ in range(count)]

    def _resolve_field(self, field_def: Any) -> Any:
        if isinstance(field_def, dict):
            if 'choice' in field_def:
                # convert numpy's choice result to a native python type
                picked = self._rng.choice(field_def['choice'])
                return picked.item() if hasattr(picked, 'item') else picked
            if 'between' in field_def:
                low, high = field_def['between']
                return int(self._rng.integers(low, high, endpoint=True))
            raise ValueError(f"unknown field definition: {field_def!r}")

        if isinstance(field_def, tuple) and len(field_def) == 2 and isinstance(field_def[1], dict):
            provider, kwargs = field_def
        else:
            provider, kwargs = field_def, {}
        try:
            method = getattr(self._fake, provider)
        except AttributeError:
            raise ValueError(f"faker has no provider '{provider}'")
        return method(**kwargs)

    def record(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        """one dict shaped by schema: field -> faker provider, (provider, kwargs), {'choice': [...]} or {'between': (lo, hi)}"""
        return {field: self._resolve_field(field_def) for field, field_def in schema.items()}


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> List[Dict[str, Any]]:
        """generate count records into an ordered dynarr list"""
        return from_iterable(self._generator.record(self._schema) for _ in range(count))


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
