import pytest

from lynxvm.value import INT_MAX, INT_MIN, Value, ValueKind


def test_nil_is_default():
    value = Value.nil()
    assert value.kind is ValueKind.NIL
    assert value.to_python() is None
    assert value == Value()


def test_of_none_is_nil():
    assert Value.of(None) == Value.nil()


def test_bool_is_not_taken_as_int():
    value = Value.of(True)
    assert value.kind is ValueKind.BOOLEAN
    assert value.to_python() is True


def test_int_value():
    value = Value.of(5)
    assert value.kind is ValueKind.INT
    assert value.to_python() == 5


@pytest.mark.parametrize("number", [INT_MIN, INT_MAX])
def test_int_limits_accepted(number):
    assert Value.of(number).to_python() == number


@pytest.mark.parametrize("number", [INT_MIN - 1, INT_MAX + 1])
def test_int_out_of_range(number):
    with pytest.raises(OverflowError):
        Value.of(number)


def test_exact_float_kept():
    value = Value.of(0.5)
    assert value.kind is ValueKind.FLOAT
    assert value.to_python() == 0.5


def test_float_rounding_is_idempotent():
    once = Value.of(0.1)
    again = Value.of(once.to_python())
    assert again == once


def test_float_from_int_payload():
    value = Value(ValueKind.FLOAT, 3)
    assert value.to_python() == 3.0
    assert isinstance(value.to_python(), float)


def test_of_existing_value_returns_it():
    value = Value.of(7)
    assert Value.of(value) is value


def test_of_unsupported_type():
    with pytest.raises(TypeError):
        Value.of("text")


def test_mismatched_payload_rejected():
    with pytest.raises(TypeError):
        Value(ValueKind.INT, 1.5)
    with pytest.raises(TypeError):
        Value(ValueKind.BOOLEAN, 1)
    with pytest.raises(TypeError):
        Value(ValueKind.NIL, 0)


def test_kind_from_int():
    assert Value(3, True).kind is ValueKind.BOOLEAN


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        Value(99)


def test_string_kind_has_no_python_form():
    with pytest.raises(TypeError):
        Value(ValueKind.STRING).to_python()