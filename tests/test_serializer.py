import json

import pytest

from skelforge.errors import SpecFormatError, SpecSerializationError, SpecValidationError
from skelforge.mapping import SkeletonPrimitive, SkeletonSpec
from skelforge.spec import deserialize, hydrate_spec, load_static_spec, serialize


@pytest.fixture
def spec():
    return SkeletonSpec(
        root_key="root-div",
        children=[
            SkeletonPrimitive(key="avatar", shape="circle", width="40px", height="40px"),
            SkeletonPrimitive(key="body", shape="line", width=300, height="1rem", lines=3, style={"marginTop": "4px"}),
        ],
        layout="stack",
        gap="8px",
    )


def test_round_trip(spec):
    text = serialize(spec)
    assert json.loads(text)["rootKey"] == "root-div"
    assert "borderRadius" not in text
    assert deserialize(text) == spec


def test_not_json_is_a_format_error():
    with pytest.raises(SpecFormatError):
        deserialize("{not json")
    with pytest.raises(SpecFormatError):
        deserialize("[1, 2, 3]")


def test_invalid_structure_is_a_validation_error():
    with pytest.raises(SpecValidationError) as excinfo:
        deserialize('{"children": [{"key": "a"}, {"key": "a", "shape": "rect"}]}')
    assert len(excinfo.value.errors) == 2
    assert "invalid specification structure" in str(excinfo.value)
    assert isinstance(excinfo.value, SpecSerializationError)


def test_non_finite_numbers_are_refused():
    broken = SkeletonSpec(children=[SkeletonPrimitive(key="a", shape="rect", width=float("nan"))])
    with pytest.raises(SpecSerializationError):
        serialize(broken)


def test_load_static_spec_validates(spec):
    assert load_static_spec(serialize(spec)).children[0].key == "avatar"
    with pytest.raises(SpecValidationError):
        load_static_spec('{"children": "nope"}')


def test_hydrate_merges_without_mutating(spec):
    hydrated = hydrate_spec(
        spec,
        {
            "gap": "12px",
            "children": [{"key": "body", "lines": 5}, {"key": "unknown", "shape": "rect"}],
        },
    )
    assert hydrated.gap == "12px"
    assert hydrated.children[1].lines == 5
    assert hydrated.children[1].style == {"marginTop": "4px"}
    assert len(hydrated.children) == 2
    assert spec.gap == "8px"
    assert spec.children[1].lines == 3


def test_hydrate_without_enhancements_is_a_copy(spec):
    copy = hydrate_spec(spec)
    assert copy == spec
    assert copy is not spec
