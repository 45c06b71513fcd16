'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

schema-driven fake records, served as an endless lazy query.
'''

import numpy as np
from faker import Faker
from fromq import Query, Source
from typing import Any, Dict, Iterator, Optional


class Generator:
    """schema interpreter.

    a schema is a dict of field -> spec, where a spec is one of:
      - a faker provider name (``'word'``) or ``(name, kwargs)`` tuple
      - ``{'_qen_provider': 'choice', 'from': [...]}``
      - ``{'_qen_provider': 'ref', 'key': 'field'}`` (an earlier field)
      - ``{'_qen_provider': 'literal', 'value': ...}``
      - a nested dict schema
    anything else is taken literally.
    """

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
        if provider == "choice":
            # numpy scalars back to native python values
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result
        if provider == "ref":
            if config["key"] not in context:
                raise ValueError(f"reference to '{config['key']}' not found in current context.")
            return context[config["key"]]
        if provider == "literal":
            return config["value"]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, context)
            record = {}
            for key, spec in schema.items():
                record[key] = self.create(spec, {**context, **record})
            return record
        if isinstance(schema, str):
            return self._resolve_faker_method(schema) if hasattr(self._fake, schema) else schema
        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])
        return schema


class SchemaSource(Source[Dict[str, Any]]):
    """endless records. every traversal restarts from the seed, so traversals agree."""

    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._seed = seed

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        generator = Generator(self._seed)
        while True:
            yield generator.create(self._schema)


def from_schema(schema: Any, seed: Optional[int] = None) -> Query:
    """an endless query of records; bound it with take() or take_while()."""
    return Query(SchemaSource(schema, seed))
