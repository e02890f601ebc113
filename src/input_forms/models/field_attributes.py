"""
Field definition models for building input forms.

FieldAttributes is the attribute set consumed by
InputGroup.new_input_field(). It only describes a field; dependency
expressions and filters are checked when the field is added to a form.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class InputType(str, Enum):
    """Type of an input, used by prompting layers for validation hints."""

    STRING = "string"
    NUMBER = "number"
    FILE_PATH = "file_path"
    HTTP_URL = "http_url"
    EMAIL_ADDRESS = "email_address"
    JSON_INPUT = "json_input"
    CONTAINER = "container"


class FieldAttributes(BaseModel):
    """
    Attributes of an input field.

    Fields sharing a non-zero group_id are collected into the container
    registered for that id, and only one of them is asked for. Entries
    of depends_on have the form "field_name", meaning the field is asked
    for only after that field is entered, or "field_name=value1|value2",
    meaning it is asked for only when that field holds one of the values.
    """

    name: str = Field(..., min_length=1, description="Field name, unique within a form")
    display_name: str = Field(default="", description="Name to display when requesting input")
    description: str = Field(default="", description="Long description, also used as help text")

    group_id: int = Field(
        default=0,
        ge=0,
        description="Id of the alternative container this field belongs to, 0 for none",
    )
    input_type: InputType = Field(default=InputType.STRING, description="Type of the input")

    value_from_file: bool = Field(
        default=False,
        description="Whether the entered value is a path whose file content is the value",
    )
    default_value: str | None = Field(default=None, description="Default value, None if none")
    sensitive: bool = Field(default=False, description="Whether the value should be masked")

    env_vars: list[str] = Field(
        default_factory=list,
        description="Environment variables the value can be sourced from, in order",
    )
    depends_on: list[str] = Field(
        default_factory=list,
        description="Dependency expressions of the form name or name=value1|value2",
    )

    inclusion_filter: str = Field(default="", description="Regex the value must match")
    inclusion_filter_error_message: str = Field(default="")
    exclusion_filter: str = Field(default="", description="Regex the value must not match")
    exclusion_filter_error_message: str = Field(default="")

    accepted_values: list[str] | None = Field(default=None, description="List of acceptable values")
    accepted_values_error_message: str = Field(default="")

    tags: list[str] = Field(default_factory=list, description="Tags used to select field subsets")

    @model_validator(mode="after")
    def _fill_display_name(self) -> "FieldAttributes":
        if not self.display_name:
            self.display_name = self.name
        return self
