r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

seeded test data for ordq: faker-backed records and numpy-backed ascending runs.
'''

import numpy as np
from faker import Faker
from ordq import from_iterable, Enumerable
from typing import Any, Callable, Dict, List, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # later fields may refer to earlier ones
            generated_obj = {}
            for k, v in schema.items():
                generated_obj[k] = self.create(v, {**current_context, **generated_obj})
            return generated_obj

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        """count generated records, in generation order"""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])

    def take_sorted(self, count: int, key: Callable[[Any], Any]) -> Enumerable:
        """count generated records sorted by key, ready for the ordered operators"""
        return from_iterable(sorted((self._generator.create(self._schema) for _ in range(count)), key=key))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


# --- ascending integer runs ---

def ascending_ints(count: int, low: int = 0, high: int = 20, seed: Optional[int] = None) -> List[int]:
    """count ints drawn from [low, high] and sorted. a narrow range gives plenty of duplicates."""
    rng = np.random.default_rng(seed)
    return np.sort(rng.integers(low, high, size=count, endpoint=True)).tolist()


def ascending_runs(run_count: int, max_length: int = 12, low: int = 0, high: int = 20,
                   seed: Optional[int] = None) -> List[List[int]]:
    """run_count ascending lists of random length in [0, max_length]"""
    rng = np.random.default_rng(seed)
    lengths = rng.integers(0, max_length, size=run_count, endpoint=True)
    return [np.sort(rng.integers(low, high, size=n, endpoint=True)).tolist() for n in lengths]
