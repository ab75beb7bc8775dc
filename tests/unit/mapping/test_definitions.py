import pytest
from tests_helpers import make_property

from fieldmap import ClassMapping, FieldMapping, MappingDirection, Omitted, TypeDescriptor

A_NAME = make_property("name", str)
B_NAME = make_property("full_name", str)
A_AGE = make_property("age", int)
B_AGE = make_property("years", int)


def test_defaults():
    field_mapping = FieldMapping(a_property=A_NAME, b_property=B_NAME)

    assert field_mapping.a_inverse is None
    assert field_mapping.b_inverse is None
    assert field_mapping.direction == MappingDirection.BIDIRECTIONAL
    assert not field_mapping.excluded
    assert field_mapping.converter_id is None
    assert not field_mapping.by_default
    assert field_mapping.source_mapped_on_null is Omitted()
    assert field_mapping.destination_mapped_on_null is Omitted()


def test_is_immutable():
    field_mapping = FieldMapping(a_property=A_NAME, b_property=B_NAME)

    with pytest.raises(AttributeError):
        field_mapping.excluded = True  # type: ignore[misc]


def test_properties_are_required():
    with pytest.raises(ValueError, match="Both a_property and b_property must be set"):
        FieldMapping(a_property=A_NAME, b_property=None)  # type: ignore[arg-type]


def test_bad_direction():
    with pytest.raises(TypeError):
        FieldMapping(a_property=A_NAME, b_property=B_NAME, direction="a_to_b")  # type: ignore[arg-type]


def test_bad_null_policy():
    with pytest.raises(TypeError, match="source_mapped_on_null must be bool or Omitted()"):
        FieldMapping(a_property=A_NAME, b_property=B_NAME, source_mapped_on_null=None)  # type: ignore[arg-type]


def test_excluded_and_converter_coexist():
    field_mapping = FieldMapping(a_property=A_NAME, b_property=B_NAME, excluded=True, converter_id="upper")

    assert field_mapping.excluded
    assert field_mapping.converter_id == "upper"


@pytest.mark.parametrize(
    ["direction", "flipped"],
    [
        (MappingDirection.A_TO_B, MappingDirection.B_TO_A),
        (MappingDirection.B_TO_A, MappingDirection.A_TO_B),
        (MappingDirection.BIDIRECTIONAL, MappingDirection.BIDIRECTIONAL),
    ],
)
def test_direction_flip(direction, flipped):
    assert direction.flip() == flipped


def test_flip():
    a_inverse = make_property("owner", str)
    field_mapping = FieldMapping(
        a_property=A_NAME,
        b_property=B_NAME,
        a_inverse=a_inverse,
        direction=MappingDirection.A_TO_B,
        converter_id="upper",
        source_mapped_on_null=True,
    )

    assert field_mapping.flip() == FieldMapping(
        a_property=B_NAME,
        b_property=A_NAME,
        b_inverse=a_inverse,
        direction=MappingDirection.B_TO_A,
        converter_id="upper",
        destination_mapped_on_null=True,
    )
    assert field_mapping.flip().flip() == field_mapping


@pytest.mark.parametrize(
    ["direction", "excluded", "a_to_b", "b_to_a"],
    [
        (MappingDirection.BIDIRECTIONAL, False, True, True),
        (MappingDirection.A_TO_B, False, True, False),
        (MappingDirection.B_TO_A, False, False, True),
        (MappingDirection.BIDIRECTIONAL, True, False, False),
    ],
)
def test_is_applicable(direction, excluded, a_to_b, b_to_a):
    field_mapping = FieldMapping(a_property=A_NAME, b_property=B_NAME, direction=direction, excluded=excluded)

    assert field_mapping.is_applicable(MappingDirection.A_TO_B) == a_to_b
    assert field_mapping.is_applicable(MappingDirection.B_TO_A) == b_to_a


def test_is_applicable_bidirectional():
    field_mapping = FieldMapping(a_property=A_NAME, b_property=B_NAME)

    with pytest.raises(ValueError):
        field_mapping.is_applicable(MappingDirection.BIDIRECTIONAL)


@pytest.mark.parametrize(
    ["value", "default", "result"],
    [
        (Omitted(), True, True),
        (Omitted(), False, False),
        (True, False, True),
        (False, True, False),
    ],
)
def test_resolve_null_policies(value, default, result):
    field_mapping = FieldMapping(
        a_property=A_NAME,
        b_property=B_NAME,
        source_mapped_on_null=value,
        destination_mapped_on_null=value,
    )

    assert field_mapping.resolve_source_mapped_on_null(default) is result
    assert field_mapping.resolve_destination_mapped_on_null(default) is result


def test_class_mapping_get_applicable():
    name_mapping = FieldMapping(a_property=A_NAME, b_property=B_NAME, direction=MappingDirection.A_TO_B)
    age_mapping = FieldMapping(a_property=A_AGE, b_property=B_AGE)
    class_mapping = ClassMapping(
        a_type=TypeDescriptor(object),
        b_type=TypeDescriptor(object),
        field_mappings=(name_mapping, age_mapping),
    )

    assert class_mapping.get_applicable(MappingDirection.A_TO_B) == (name_mapping, age_mapping)
    assert class_mapping.get_applicable(MappingDirection.B_TO_A) == (age_mapping, )
