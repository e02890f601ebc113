"""Shared fixtures for input-forms tests."""

import pytest

from input_forms import FieldAttributes, InputCollection, InputGroup, MappingEnvironment


@pytest.fixture
def environment() -> MappingEnvironment:
    """Environment provider the test forms source variables from."""
    return MappingEnvironment()


@pytest.fixture
def collection(environment: MappingEnvironment) -> InputCollection:
    """
    Collection with a form exercising alternatives and dependencies.

    Input paths of "input-form":

        attrib11 1 -> X
        attrib12 1 -> attrib121 2 -> X
                   -> attrib122 2 -> attrib1221 -> X
                   -> attrib131   -> attrib1311 -> X
                                  -> attrib1312 -> X
        attrib13 1 -> attrib131   -> attrib1311 -> X
                                  -> attrib1312 -> X
                   -> attrib132 3 -> X
                   -> attrib133 3 -> X
        attrib14   -> attrib141
    """
    ic = InputCollection(environment=environment)

    ig = ic.new_group("input-form", "test group description")
    ic.new_group("input-form2", "input form 2 description")
    ic.new_group("input-form3", "input form 3 description")

    ig.new_input_container("group1", "Group 1", "description for group 1", 1)
    ig.new_input_container("group2", "Group 2", "description for group 2", 2)
    ig.new_input_container("group3", "Group 3", "description for group 3", 3)

    ig.new_input_field(FieldAttributes(
        name="attrib11",
        display_name="Attrib 11",
        description="description for attrib11.",
        group_id=1,
        env_vars=["ATTRIB11_ENV1", "ATTRIB11_ENV2", "ATTRIB11_ENV3"],
        tags=["tag1"],
    ))
    ig.new_input_field(FieldAttributes(
        name="attrib12",
        display_name="Attrib 12",
        description="description for attrib12.",
        group_id=1,
        env_vars=["ATTRIB12_ENV1"],
        tags=["tag1"],
    ))
    ig.new_input_field(FieldAttributes(
        name="attrib13",
        display_name="Attrib 13",
        description="description for attrib13.",
        group_id=1,
        env_vars=["ATTRIB13_ENV1", "ATTRIB13_ENV2"],
        tags=["tag2"],
    ))
    ig.new_input_field(FieldAttributes(
        name="attrib14",
        display_name="Attrib 14",
        description="description for attrib14.",
        default_value="default value for attrib14",
        tags=["tag1"],
    ))
    ig.new_input_field(FieldAttributes(
        name="attrib121",
        display_name="Attrib 121",
        description="description for attrib121.",
        group_id=2,
        depends_on=["attrib12=value for attrib12|value for attrib12 - A"],
        tags=["tag1"],
    ))
    ig.new_input_field(FieldAttributes(
        name="attrib122",
        display_name="Attrib 122",
        description="description for attrib122.",
        group_id=2,
        depends_on=["attrib12=value for attrib12|value for attrib12 - B"],
        tags=["tag1"],
    ))
    ig.new_input_field(FieldAttributes(
        name="attrib131",
        display_name="Attrib 131",
        description="description for attrib131.",
        depends_on=["attrib12", "attrib13"],
        tags=["tag1"],
    ))
    ig.new_input_field(FieldAttributes(
        name="attrib132",
        display_name="Attrib 132",
        description="description for attrib132.",
        group_id=3,
        value_from_file=True,
        env_vars=["ATTRIB132"],
        depends_on=["attrib13"],
        tags=["tag1"],
    ))
    ig.new_input_field(FieldAttributes(
        name="attrib133",
        display_name="Attrib 133",
        description="description for attrib133.",
        group_id=3,
        default_value="default value for attrib133",
        depends_on=["attrib13"],
        tags=["tag1"],
    ))
    ig.new_input_field(FieldAttributes(
        name="attrib141",
        display_name="Attrib 141",
        description="description for attrib141.",
        depends_on=["attrib14=value for attrib14 - X"],
        tags=["tag1"],
    ))
    ig.new_input_field(FieldAttributes(
        name="attrib1221",
        display_name="Attrib 1221",
        description="description for attrib1221.",
        depends_on=["attrib122"],
    ))
    ig.new_input_field(FieldAttributes(
        name="attrib1311",
        display_name="Attrib 1311",
        description="description for attrib1311.",
        depends_on=["attrib131"],
    ))
    ig.new_input_field(FieldAttributes(
        name="attrib1312",
        display_name="Attrib 1312",
        description="description for attrib1312.",
        depends_on=["attrib131"],
    ))

    return ic


@pytest.fixture
def form(collection: InputCollection) -> InputGroup:
    return collection.group("input-form")


@pytest.fixture
def values(form: InputGroup) -> dict[str, str]:
    """Direct string storage bound to every field of the form."""
    store: dict[str, str] = {}
    form.bind_values(store, optional=False)
    return store


@pytest.fixture
def attrib132_file(tmp_path):
    path = tmp_path / "attrib132"
    path.write_text('{"attrib132":"value for attrib132 from file"}', encoding="utf-8")
    return path
