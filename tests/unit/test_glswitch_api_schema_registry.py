"""Unit tests for glswitch.api.schema_registry and the base output schema."""

import pytest
from pydantic import ValidationError

from glswitch.api._output_schemas._base import BaseOutputSchema
from glswitch.api._output_schemas.switch import SetLinkOutput
from glswitch.api.schema_registry import get_output_schema, output_schema


def test_set_link_schema_is_registered():
    assert get_output_schema("switch", "set_link") is SetLinkOutput
    assert get_output_schema("switch", "unknown") is None


def test_duplicate_registration_fails():
    with pytest.raises(ValueError, match="already registered for switch.set_link"):

        @output_schema("switch", "set_link")
        class Duplicate(BaseOutputSchema):
            pass


def test_base_schema_defaults_and_rejects_unknown_keys():
    assert BaseOutputSchema().model_dump() == {"errors": [], "warnings": []}
    with pytest.raises(ValidationError):
        BaseOutputSchema(status="ok")
