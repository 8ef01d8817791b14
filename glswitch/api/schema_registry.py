"""Output schemas keyed by (domain, command)."""

from collections.abc import Callable

from pydantic import BaseModel

_SCHEMAS: dict[tuple[str, str], type[BaseModel]] = {}


def output_schema(domain: str, command_name: str) -> Callable[[type[BaseModel]], type[BaseModel]]:
    """Class decorator registering the output model of ``cmd_<command_name>`` in ``domain``."""

    def register(schema_class: type[BaseModel]) -> type[BaseModel]:
        key = (domain, command_name)
        if key in _SCHEMAS:
            raise ValueError(f"Schema already registered for {domain}.{command_name}")
        _SCHEMAS[key] = schema_class
        return schema_class

    return register


def get_output_schema(domain: str, command_name: str) -> type[BaseModel] | None:
    return _SCHEMAS.get((domain, command_name))
