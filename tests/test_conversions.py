import math

import numpy as np
import pytest

from vec3 import InvalidSequenceError, ParseVector3Error, Vector3, Vector3Error


def test_to_tuple_and_list():
    v = Vector3(1, 2, 3)
    assert v.to_tuple() == (1, 2, 3)
    assert v.to_list() == [1, 2, 3]


def test_unpacking():
    x, y, z = Vector3(4, 5, 6)
    assert (x, y, z) == (4, 5, 6)


def test_to_numpy():
    arr = Vector3(1, 2, 3).to_numpy()
    assert arr.dtype == np.float64
    assert arr.shape == (3,)
    np.testing.assert_array_equal(arr, np.array([1.0, 2.0, 3.0]))


@pytest.mark.parametrize("values", [(1.0, 2.0, 3.0), [1.0, 2.0, 3.0], np.array([1.0, 2.0, 3.0])])
def test_from_sequence(values):
    assert Vector3.from_sequence(values) == Vector3(1.0, 2.0, 3.0)


def test_from_sequence_roundtrips_numpy():
    v = Vector3(0.5, -1.25, 8.0)
    assert Vector3.from_sequence(v.to_numpy()) == v


@pytest.mark.parametrize("values", [(), (1.0,), [1.0, 2.0], (1, 2, 3, 4)])
def test_from_sequence_wrong_length(values):
    with pytest.raises(InvalidSequenceError):
        Vector3.from_sequence(values)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Vector3(1.0, 2.0, 3.0)", Vector3(1.0, 2.0, 3.0)),
        ("Vector3(1.3,0,-5.35501)", Vector3(1.3, 0.0, -5.35501)),
        ("(1, 2, 3)", Vector3(1.0, 2.0, 3.0)),
        ("  Vector3( 1e3 , -2.5 , 0 )  ", Vector3(1000.0, -2.5, 0.0)),
    ],
)
def test_parse(text, expected):
    assert Vector3.parse(text) == expected


def test_parse_roundtrips_str_and_repr():
    v = Vector3(0.1, -2.75, 1e-9)
    assert Vector3.parse(repr(v)) == v
    assert Vector3.parse(str(v)) == v


def test_parse_non_finite():
    v = Vector3.parse("Vector3(nan, inf, -inf)")
    assert math.isnan(v.x)
    assert v.y == math.inf
    assert v.z == -math.inf


@pytest.mark.parametrize(
    "text",
    [
        "",
        "1, 2, 3",
        "Vec3(1, 2, 3)",
        "Vector3(1, 2, 3",
        "Vector3()",
        "Vector3(1, 2)",
        "Vector3(1, 2, 3, 4)",
        "Vector3((1, 2, 3))",
    ],
)
def test_parse_invalid_format(text):
    with pytest.raises(ParseVector3Error):
        Vector3.parse(text)


def test_parse_invalid_number():
    with pytest.raises(ParseVector3Error) as excinfo:
        Vector3.parse("Vector3(1, two, 3)")
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_error_hierarchy():
    with pytest.raises(ValueError):
        Vector3.parse("nope")
    with pytest.raises(Vector3Error):
        Vector3.from_sequence([1])
