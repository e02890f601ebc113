"""Tests for input fields, value sourcing and hints."""

import pytest

from input_forms import (
    AttributeSlot,
    BindingError,
    FieldNotBoundError,
    FieldNotFoundError,
    HintResolutionError,
    InputCollection,
    InputValidationError,
    InvalidHintError,
    OptionalValueSlot,
    ValueSlot,
)
from input_forms.config import get_config
from input_forms.forms.hints import completion_values


class TestValidation:
    """Tests for accepted values and filters."""

    def test_accepted_values(self, form, values):
        field = form.get_input_field("attrib11")
        field.set_accepted_values(["aa", "bb", "cc"], "error")

        with pytest.raises(InputValidationError) as exc_info:
            field.set_value("dd")
        assert str(exc_info.value) == "error"
        assert exc_info.value.error_type == "accepted_values"
        assert exc_info.value.field_name == "attrib11"

        field.set_value("bb")
        assert field.value() == "bb"

    def test_inclusion_filter(self, form, values):
        field = form.get_input_field("attrib11")
        field.set_inclusion_filter("(gopher){2}", "error")

        with pytest.raises(InputValidationError) as exc_info:
            field.set_value("gopher")
        assert str(exc_info.value) == "error"

        field.set_value("gophergophergopher")
        assert field.value() == "gophergophergopher"

    def test_exclusion_filter(self, form, values):
        field = form.get_input_field("attrib11")
        field.set_exclusion_filter("(gopher){2}", "error")

        with pytest.raises(InputValidationError) as exc_info:
            field.set_value("gophergophergopher")
        assert str(exc_info.value) == "error"
        assert exc_info.value.error_type == "exclusion_filter"

        field.set_value("gopher")
        assert field.value() == "gopher"

    def test_rejected_value_is_not_stored(self, form, values):
        field = form.get_input_field("attrib14")
        field.set_accepted_values(["a"], "error")

        with pytest.raises(InputValidationError):
            field.set_value("b")
        assert field.value() == "default value for attrib14"

    def test_default_messages(self):
        form = InputCollection().new_group("g")
        field = form.new_input_field(name="size", accepted_values=["s", "m"], display_name="Size")
        field.bind(ValueSlot())

        with pytest.raises(InputValidationError) as exc_info:
            field.set_value("xl")
        assert str(exc_info.value) == "'xl' is not an accepted value for 'Size'"

    def test_lifting_accepted_values(self, form, values):
        field = form.get_input_field("attrib11")
        field.set_accepted_values(["aa"])
        field.set_accepted_values([])

        assert field.accepted_values is None
        field.set_value("anything")

    def test_clearing_skips_validation(self, form):
        field = form.get_input_field("attrib11")
        field.set_inclusion_filter("^a", "error")
        slot = OptionalValueSlot("abc")
        field.bind(slot)

        field.set_value(None)
        assert slot.value is None


class TestEnablement:
    """Tests for tag and dependency driven enablement."""

    def test_dependent_field_follows_prerequisite_value(self):
        form = InputCollection().new_group("g")
        x = form.new_input_field(name="x")
        y = form.new_input_field(name="y", depends_on=["x=1"])
        x.bind(ValueSlot())
        y.bind(ValueSlot())

        x.set_value("2")
        assert y.enabled(True) is False

        x.set_value("1")
        assert y.enabled(True) is True

    def test_conditions_are_not_evaluated_by_default(self, form, values):
        attrib141 = form.get_input_field("attrib141")

        assert attrib141.enabled() is True
        assert attrib141.enabled(True) is False

        form.set_field_value("attrib14", "value for attrib14 - X")
        assert attrib141.enabled(True) is True

    def test_first_condition_with_a_value_decides(self, form, values):
        field = form.new_input_field(
            name="decided",
            depends_on=["attrib11=a", "attrib14=value for attrib14 - X"],
        )
        field.bind(ValueSlot())

        # attrib11 has no value so attrib14's default decides
        assert field.enabled(True) is False

        form.set_field_value("attrib11", "a")
        assert field.enabled(True) is True

        form.set_field_value("attrib11", "b")
        form.set_field_value("attrib14", "value for attrib14 - X")
        assert field.enabled(True) is False

    def test_no_prerequisite_value(self, form, values):
        """A dependent field stays disabled until a prerequisite has a value."""
        assert form.get_input_field("attrib131").enabled(True) is False

        form.set_field_value("attrib13", "value for attrib13")
        assert form.get_input_field("attrib131").enabled(True) is True

    def test_listed_values_require_a_prerequisite_value(self):
        form = InputCollection().new_group("g")
        a = form.new_input_field(name="a")
        b = form.new_input_field(name="b", depends_on=["a=x|y"])

        assert b.enabled(True) is False

        a.bind(ValueSlot())
        assert b.enabled(True) is False

        a.set_value("y")
        assert b.enabled(True) is True

        a.set_value("z")
        assert b.enabled(True) is False

    def test_fields_without_dependencies_are_enabled(self, form):
        assert form.get_input_field("attrib14").enabled(True) is True

    def test_tags(self, form):
        assert form.get_input_field("attrib11").enabled(False, "tag1") is True
        assert form.get_input_field("attrib11").enabled(False, "tag2", "tag1") is True
        assert form.get_input_field("attrib13").enabled(False, "tag1") is False
        assert form.get_input_field("attrib1221").enabled(False, "tag1") is False
        assert form.get_input_field("attrib1221").enabled() is True

    def test_enabled_inputs(self, form):
        group1 = form.inputs[0]
        assert [i.name for i in group1.enabled_inputs(False, "tag2")] == ["attrib13"]


class TestBinding:
    """Tests for binding fields to storage."""

    def test_not_a_slot(self, form):
        field = form.get_input_field("attrib11")
        with pytest.raises(BindingError):
            field.bind("attrib11")

    def test_storage_must_hold_strings(self, form):
        class Record:
            count = 5
            missing = None

        field = form.get_input_field("attrib11")
        with pytest.raises(BindingError):
            field.bind(AttributeSlot(Record(), "count", optional=True))
        with pytest.raises(BindingError):
            field.bind(AttributeSlot(Record(), "missing"))
        assert not field.is_bound

    def test_default_written_on_bind(self, form):
        field = form.get_input_field("attrib14")
        assert field.optional

        empty = ValueSlot()
        field.bind(empty)
        assert empty.value == "default value for attrib14"

        holding = ValueSlot("mine")
        field.bind(holding)
        assert holding.value == "mine"

    def test_set_value_needs_binding(self, form):
        field = form.get_input_field("attrib11")
        assert field.value() is None

        with pytest.raises(FieldNotBoundError):
            field.set_value("value")

    def test_direct_slot_is_cleared_to_empty_string(self, form):
        slot = ValueSlot("value")
        field = form.get_input_field("attrib11")
        field.bind(slot)

        field.set_value(None)
        assert slot.value == ""
        assert field.bound_value() is None
        assert not field.has_bound_value()


class TestEnvironmentSourcing:
    """Tests for environment variable fallbacks."""

    def test_first_set_variable_wins(self, form, values, environment):
        field = form.get_input_field("attrib11")
        assert not field.has_value()

        environment.set("ATTRIB11_ENV3", "value from env3")
        assert field.has_value()
        assert field.value() == "value from env3"

        environment.set("ATTRIB11_ENV1", "value from env1")
        assert field.value() == "value from env1"

        field.set_value("bound value")
        assert field.value() == "bound value"

    def test_entered_empty_value_hides_environment(self, form, values, environment):
        """An empty string entered for a field is its value."""
        environment.set("ATTRIB12_ENV1", "value from env")
        field = form.get_input_field("attrib12")
        assert field.value() == "value from env"

        form.set_field_value("attrib12", "")
        field.set_input()

        assert field.value() == ""
        assert field.has_bound_value()
        assert form.input_values() == {"attrib12": ""}

        field.set_value(None)
        assert field.value() == "value from env"

    def test_empty_storage_on_bind_is_no_value(self, form, environment):
        environment.set("ATTRIB12_ENV1", "value from env")
        field = form.get_input_field("attrib12")
        field.bind(ValueSlot(""))

        assert field.bound_value() is None
        assert field.value() == "value from env"

    def test_unbound_field_reads_environment(self, form, environment):
        environment.set("ATTRIB12_ENV1", "value from env")
        assert form.get_field_value("attrib12") == "value from env"

    def test_long_description_names_variables(self, form):
        assert form.get_input_field("attrib12").long_description == (
            "description for attrib12. It will be sourced from the environment "
            "variable ATTRIB12_ENV1 if not provided."
        )
        assert form.get_input_field("attrib14").long_description == "description for attrib14."


class TestFileSourcing:
    """Tests for fields whose value is read from a file."""

    def test_value_read_from_file_path_in_environment(
        self, form, values, environment, attrib132_file
    ):
        field = form.get_input_field("attrib132")
        environment.set("ATTRIB132", str(attrib132_file))

        value_from_file, paths = field.value_from_file()
        assert value_from_file is True
        assert paths == [str(attrib132_file)]

        # the environment names a path, not the value
        assert field.value() is None

        field.set_value(paths[0])
        assert field.value() == '{"attrib132":"value for attrib132 from file"}'

    def test_paths_must_exist(self, form, environment, tmp_path):
        environment.set("ATTRIB132", str(tmp_path / "missing"))
        assert form.get_input_field("attrib132").value_from_file() == (True, [])

    def test_unreadable_file(self, form, values, tmp_path):
        with pytest.raises(OSError):
            form.set_field_value("attrib132", str(tmp_path / "missing"))


class TestHints:
    """Tests for field value hints."""

    def test_hint_from_json_of_another_field(self, form, values, attrib132_file):
        assert values["attrib133"] == "default value for attrib133"

        form.add_field_value_hint("attrib133", "field://attrib132/attrib132")
        form.set_field_value("attrib132", str(attrib132_file))

        hint_values = form.get_field_value_hints("attrib133")
        assert hint_values == ["value for attrib132 from file"]

        form.set_field_value("attrib133", hint_values[0])
        assert form.get_field_value("attrib133") == "value for attrib132 from file"

    def test_hint_on_field_with_upper_case_name(self):
        form = InputCollection().new_group("g")
        form.new_input_field(name="A").bind(ValueSlot('{"k":"v"}'))
        form.new_input_field(name="B").bind(ValueSlot())

        form.add_field_value_hint("B", "field://A/k")
        assert form.get_field_value_hints("B") == ["v"]

    def test_hint_paths(self):
        form = InputCollection().new_group("g")
        form.new_input_field(name="projects").bind(ValueSlot(
            '{"items": ["a", "b"], "owner": {"email": "x@y.z", "id": 7}}'
        ))
        form.new_input_field(name="project").bind(ValueSlot())

        for hint in (
            "field://projects/items",
            "field://projects/items/1",
            "field://projects/owner/email",
            "field://projects/owner/id",
            "field://projects/owner",
        ):
            form.add_field_value_hint("project", hint)

        assert form.field_value_hint_uris("project")[0] == "field://projects/items"
        assert form.get_field_value_hints("project") == [
            "a",
            "b",
            "b",
            "x@y.z",
            "7",
            '{"email": "x@y.z", "id": 7}',
        ]

    def test_missing_path(self):
        form = InputCollection().new_group("g")
        form.new_input_field(name="doc").bind(ValueSlot('{"k": "v"}'))
        form.new_input_field(name="other").bind(ValueSlot())
        form.add_field_value_hint("other", "field://doc/nope")

        with pytest.raises(HintResolutionError):
            form.get_field_value_hints("other")

    def test_hinted_field_without_value(self, form, values):
        form.add_field_value_hint("attrib133", "field://attrib132/attrib132")
        assert form.get_field_value_hints("attrib133") == []

    def test_hinted_field_without_json(self, form, values):
        form.set_field_value("attrib11", "not json")
        form.add_field_value_hint("attrib12", "field://attrib11/key")

        with pytest.raises(HintResolutionError):
            form.get_field_value_hints("attrib12")

    def test_unknown_hinted_field(self, form, values):
        form.add_field_value_hint("attrib12", "field://nofield/key")

        with pytest.raises(HintResolutionError) as exc_info:
            form.get_field_value_hints("attrib12")
        assert exc_info.value.hint == "field://nofield/key"

    def test_unimplemented_schemes(self, form, values):
        form.add_field_value_hint("attrib11", "https://example.com/values")
        form.add_field_value_hint("attrib12", "file:///tmp/values")

        with pytest.raises(HintResolutionError):
            form.get_field_value_hints("attrib11")
        with pytest.raises(HintResolutionError):
            form.get_field_value_hints("attrib12")

    def test_invalid_hints(self, form):
        with pytest.raises(InvalidHintError):
            form.add_field_value_hint("attrib11", "ftp://example.com")
        with pytest.raises(InvalidHintError):
            form.add_field_value_hint("attrib11", "field://")
        with pytest.raises(FieldNotFoundError):
            form.add_field_value_hint("nofield", "field://attrib11/key")

        assert form.field_value_hint_uris("attrib11") == []


class TestCompletionValues:
    """Tests for the values offered when prompting for a field."""

    def test_environment_then_current_value(self, form, values, environment):
        environment.set("ATTRIB11_ENV2", "value from env2")
        environment.set("ATTRIB11_ENV3", "value from env3")

        field = form.get_input_field("attrib11")
        assert completion_values(form, field) == ["value from env3", "value from env2"]

    def test_hint_values(self, form, values, attrib132_file):
        form.add_field_value_hint("attrib133", "field://attrib132/attrib132")
        form.set_field_value("attrib132", str(attrib132_file))

        field = form.get_input_field("attrib133")
        assert completion_values(form, field) == [
            "value for attrib132 from file",
            "default value for attrib133",
        ]

    def test_accepted_values(self, form, values):
        field = form.get_input_field("attrib11")
        field.set_accepted_values(["aa", "bb"])
        assert completion_values(form, field) == ["aa", "bb"]

    def test_file_paths_and_saved_value(self, form, values, environment, attrib132_file):
        environment.set("ATTRIB132", str(attrib132_file))
        field = form.get_input_field("attrib132")

        assert completion_values(form, field) == [str(attrib132_file)]

        field.set_value(str(attrib132_file))
        assert completion_values(form, field) == [
            str(attrib132_file),
            get_config().saved_value_label,
        ]
