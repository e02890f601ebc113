"""
Form reference models.

A FormSchema describes the fields of an input form, for documentation
or for client side form libraries, and can be exported as JSON Schema.
"""

from typing import Any

from pydantic import BaseModel, Field

_JSON_TYPES = {
    "number": "number",
}

_JSON_FORMATS = {
    "http_url": "uri",
    "email_address": "email",
    "file_path": "path",
}


class FormFieldSchema(BaseModel):
    """Reference of a single form field."""

    name: str = Field(..., description="Field name")
    type: str = Field(..., description="Input type of the field")
    title: str = Field(..., description="Display name")
    description: str | None = Field(default=None, description="Help text")

    default: str | None = Field(default=None, description="Default value, masked if sensitive")
    sensitive: bool = Field(default=False, description="Whether the value is masked")
    value_from_file: bool = Field(default=False, description="Whether the input is a file path")

    # Validation
    enum_values: list[str] | None = Field(default=None, description="Accepted values")
    pattern: str | None = Field(default=None, description="Inclusion regex")

    # Sourcing and flow
    env_vars: list[str] = Field(default_factory=list, description="Environment variable fallbacks")
    depends_on: list[str] = Field(default_factory=list, description="Dependency conditions")
    tags: list[str] = Field(default_factory=list)
    container: str | None = Field(
        default=None, description="Name of the alternatives container the field belongs to"
    )


class FormSchema(BaseModel):
    """Reference of an input form."""

    form_id: str = Field(..., description="Form identifier")
    title: str = Field(..., description="Form title")
    description: str | None = Field(default=None, description="Form description")
    fields: list[FormFieldSchema] = Field(..., description="Fields in declaration order")

    def get_field(self, name: str) -> FormFieldSchema | None:
        return next((f for f in self.fields if f.name == name), None)

    def to_json_schema(self) -> dict[str, Any]:
        """Export as JSON Schema dict."""
        properties = {}

        for field in self.fields:
            prop: dict[str, Any] = {
                "type": _JSON_TYPES.get(field.type, "string"),
                "title": field.title,
            }
            if field.description:
                prop["description"] = field.description
            if field.type in _JSON_FORMATS:
                prop["format"] = _JSON_FORMATS[field.type]
            if field.type == "json_input":
                prop["contentMediaType"] = "application/json"
            if field.pattern:
                prop["pattern"] = field.pattern
            if field.enum_values:
                prop["enum"] = field.enum_values
            if field.default is not None and not field.sensitive:
                prop["default"] = field.default
            if field.sensitive:
                prop["writeOnly"] = True

            properties[field.name] = prop

        return {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "type": "object",
            "title": self.title,
            "description": self.description,
            "properties": properties,
        }
