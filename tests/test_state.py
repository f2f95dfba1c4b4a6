import pytest

from lynxvm.header import Header
from lynxvm.state import REGISTER_COUNT, State, get_register, set_register
from lynxvm.value import Value


def test_fresh_registers_are_nil():
    state = State()
    assert state.get_register(0) == Value.nil()
    assert state.get_register(REGISTER_COUNT - 1) == Value.nil()
    assert len(state.registers) == REGISTER_COUNT


def test_set_and_get():
    state = State()
    state.set_register(3, Value.of(11))
    assert state.get_register(3) == Value.of(11)


def test_python_value_is_converted():
    state = State()
    state.set_register(1, True)
    assert state.get_register(1) == Value.of(True)


def test_registers_are_independent():
    state = State()
    state.set_register(1, Value.of(5))
    assert state.get_register(2) == Value.nil()
    assert state.get_register(1).to_python() == 5


def test_overwrite():
    state = State()
    state.set_register(0, Value.of(1))
    state.set_register(0, Value.of(2.5))
    assert state.get_register(0).to_python() == 2.5


def test_module_functions():
    state = State()
    set_register(state, 9, Value.of(-4))
    assert get_register(state, 9) == state.get_register(9)
    assert get_register(state, 9).to_python() == -4


@pytest.mark.parametrize("reg", [-1, REGISTER_COUNT])
def test_out_of_range(reg):
    state = State()
    with pytest.raises(IndexError):
        state.get_register(reg)
    with pytest.raises(IndexError):
        state.set_register(reg, Value.nil())


def test_small_register_file():
    state = State(register_count=4)
    state.set_register(3, 1)
    assert state.get_register(3) == Value.of(1)
    with pytest.raises(IndexError):
        state.get_register(4)


@pytest.mark.parametrize("count", [0, REGISTER_COUNT + 1])
def test_bad_register_count(count):
    with pytest.raises(ValueError):
        State(register_count=count)


def test_bad_register_type():
    with pytest.raises(TypeError):
        State().get_register("0")


def test_unsupported_value_rejected():
    with pytest.raises(TypeError):
        State().set_register(0, "text")


def test_header_is_held():
    header = Header(flags=1)
    state = State(header=header)
    assert state.header is header
    assert state.pc == 0
    assert state.stack == []