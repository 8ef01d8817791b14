"""Check a command's output dict against its registered model."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from .schema_registry import get_output_schema


def _command_key(func: Callable) -> tuple[str, str] | None:
    # glswitch.api.<domain>.cmd_<name>
    package, _, rest = func.__module__.partition(".api.")
    if package != "glswitch" or not rest or not func.__name__.startswith("cmd_"):
        return None
    return rest.split(".", 1)[0], func.__name__.removeprefix("cmd_")


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Return ``output`` normalized through the schema registered for ``func``.

    Functions outside ``glswitch.api`` or without a registered schema pass
    through unchanged.

    Raises:
        ValueError: If the output does not match the schema.
    """
    key = _command_key(func)
    schema_class = get_output_schema(*key) if key else None
    if schema_class is None:
        return output

    try:
        return schema_class.model_validate(output).model_dump(mode="python")
    except ValidationError as e:
        domain, command_name = key
        raise ValueError(f"Output of {domain}.{command_name} does not match {schema_class.__name__}: {e}") from e
