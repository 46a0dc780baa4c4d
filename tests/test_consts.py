import pytest

from vec3 import ONE, X_AXIS, Y_AXIS, Z_AXIS, ZERO, Vector3


def test_axis_values():
    assert X_AXIS == Vector3(1, 0, 0)
    assert Y_AXIS == Vector3(0, 1, 0)
    assert Z_AXIS == Vector3(0, 0, 1)
    assert ZERO == Vector3(0, 0, 0)
    assert ONE == Vector3(1, 1, 1)


def test_const_sum():
    assert ZERO + X_AXIS + Y_AXIS + Z_AXIS == ONE


def test_axes_are_orthonormal():
    assert X_AXIS.cross(Y_AXIS) == Z_AXIS
    assert Y_AXIS.cross(Z_AXIS) == X_AXIS
    assert Z_AXIS.cross(X_AXIS) == Y_AXIS
    for axis in (X_AXIS, Y_AXIS, Z_AXIS):
        assert axis.magnitude() == 1.0


def test_repr_looks_like_a_vector():
    assert repr(X_AXIS) == "Vector3(1.0, 0.0, 0.0)"
    assert str(Y_AXIS) == "(0.0, 1.0, 0.0)"


@pytest.mark.parametrize("component", ["x", "y", "z"])
def test_constants_are_read_only(component):
    with pytest.raises(AttributeError):
        setattr(X_AXIS, component, 5.0)
    assert X_AXIS == Vector3(1, 0, 0)


def test_inplace_operators_on_constants_raise():
    v = X_AXIS
    with pytest.raises(AttributeError):
        v += Y_AXIS
    with pytest.raises(AttributeError):
        v *= 2
    with pytest.raises(AttributeError):
        ONE.normalize_in_place()
    assert X_AXIS == Vector3(1, 0, 0)
    assert ONE == Vector3(1, 1, 1)


def test_results_from_constants_are_mutable():
    v = X_AXIS + Y_AXIS
    v += Z_AXIS
    assert v == ONE
    c = Z_AXIS.copy()
    c.z = 2.0
    assert c == Vector3(0, 0, 2)
    n = ONE.normalize()
    n.normalize_in_place()
    assert n.magnitude() == pytest.approx(1.0)
