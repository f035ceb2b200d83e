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
from itertools import count as _counter
from seqy import from_iterable, Sequence
from typing import Any, Callable, Dict, Iterator, Optional


class Generator:
    """schema interpreter for fake test records."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

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

        elif provider == "choice":
            # numpy hands back numpy scalars, tests want native values
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "int":
            return int(self._rng.integers(config["min"], config["max"], endpoint=True))

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # fields are built in order so later ones can ref earlier ones
            generated_obj = {}
            for k, v in schema.items():
                merged_context = {**current_context, **generated_obj}
                generated_obj[k] = self.create(v, merged_context)
            return generated_obj

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # plain literal string

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None,
                 factory: Optional[Callable[[Dict], Any]] = None):
        self._schema = schema
        self._generator = Generator(seed)
        self._factory = factory or (lambda record: record)

    def _one(self) -> Any:
        return self._factory(self._generator.create(self._schema))

    def take(self, count: int) -> Sequence:
        """a fixed batch of records, generated up front"""
        return from_iterable([self._one() for _ in range(count)])

    def stream(self) -> Iterator[Any]:
        """an endless, single-use generator of records"""
        for _ in _counter():
            yield self._one()


def from_schema(schema: Any, seed: Optional[int] = None,
                factory: Optional[Callable[[Dict], Any]] = None) -> _SchemaProvider:
    """
    creates a record generator for a schema.

    :param schema: dict of field -> faker provider name, (provider, kwargs) tuple,
                   or a {'_qen_provider': ...} config.
    :param seed: an optional seed for reproducible data.
    :param factory: optional callable turning each generated dict into another object.
    :return: a schema provider with .take() and .stream().
    """
    return _SchemaProvider(schema, seed, factory)
