# lynxvm

`lynxvm` holds the data model of a small register-based virtual machine.
It has four modules.

## `lynxvm.value`

`ValueKind` is an `IntEnum` of kind tags: `NIL`, `INT`, `FLOAT`, `BOOLEAN`,
`STRING`, `ARRAY`, `DICT`, `OBJECT` and `TUPLE`.

`Value` is a frozen dataclass with two fields, `kind` and `payload`. Each kind
checks its payload when the value is built:

- `INT` takes a signed 32-bit `int`. A value outside that range raises
  `OverflowError`.
- `FLOAT` takes an `int` or a `float`. The number is rounded to single precision.
- `BOOLEAN` takes a `bool`.
- Every other kind takes no payload, which means `None`.

A payload of the wrong type raises `TypeError`.

- `Value.nil()` returns the nil value.
- `Value.of(obj)` builds a value from `None`, a `bool`, an `int` or a `float`.
  If you pass it a `Value`, it returns that value unchanged.
- `value.to_python()` returns the payload for `NIL`, `INT`, `FLOAT` and
  `BOOLEAN`. For any other kind it raises `TypeError`.

## `lynxvm.instruction`

`Opcode` is an `IntEnum` with these members: `NOP`, `CONST`, `ADD`, `SUB`,
`MUL` and `DIV`.

`Instruction` is a frozen dataclass made of an opcode and three operands, `a`,
`b` and `c`. Each operand must be between 0 and 65535.

- `Instruction.pack()` returns 8 little-endian bytes.
- `Instruction.unpack(data)` reads an instruction back. It needs exactly 8 bytes.
  It raises `ValueError` if the length is wrong or the opcode is unknown.

## `lynxvm.header`

`Header` is a dataclass with these fields:

- `magic`: defaults to `0x6c796e78`.
- `flags`: defaults to `0`.
- `consts`: a list of `Value`.
- `bytecode`: a list of `Instruction`.

The module has three functions:

- `header_encode(header)` returns the binary form as `bytes`. It raises
  `HeaderError` if `magic` does not fit in 32 bits or `flags` does not fit in
  64 bits.
- `header_decode(data)` parses that binary form. It raises `HeaderError` if the
  input is truncated or holds an instruction with an unknown opcode. A constant
  whose kind byte is not int, float or bool is read back as nil, with no payload
  bytes.
- `header_size(header)` returns the number of bytes that `header_encode`
  produces.

`HeaderError` is a subclass of `ValueError`.

## `lynxvm.state`

`State` is built from a `Header`. It has these fields:

- `register_count`: defaults to 65536. It must be between 1 and 65536.
- `pc`: defaults to `0`.
- `stack`: a list of `Value`.
- `registers`: starts with every register set to nil.

You can reach the registers in two ways:

- the methods `State.set_register(reg, value)` and `State.get_register(reg)`;
- the functions `set_register(state, reg, value)` and `get_register(state, reg)`.

`set_register` accepts anything that `Value.of` accepts. A register index out of
range raises `IndexError`. An index that is not an `int` raises `TypeError`.

## Example

```python
from lynxvm.header import Header, header_decode, header_encode, header_size
from lynxvm.instruction import Instruction, Opcode
from lynxvm.state import State, get_register, set_register
from lynxvm.value import Value

header = Header(
    flags=0,
    consts=[Value.of(42), Value.of(1.5), Value.of(True), Value.nil()],
    bytecode=[Instruction(Opcode.CONST, 0, 0, 0), Instruction(Opcode.ADD, 0, 1, 2)],
)

blob = header_encode(header)
assert len(blob) == header_size(header)
restored = header_decode(blob)
assert [v.to_python() for v in restored.consts] == [42, 1.5, True, None]

state = State(header)
set_register(state, 3, 7)
assert get_register(state, 3).to_python() == 7
```

## Binary format

All fields are little-endian. They appear in this order:

1. magic: `u32`.
2. flags: `u64`.
3. constant count: `u32`.
4. The constants. Each one is a `u8` kind byte followed by its payload:
   - int: `i32`
   - float: `f32`
   - bool: `u8`
   - any other kind: no payload
5. instruction count: `u32`.
6. The instructions. Each one is 8 bytes: the opcode, then `a`, `b` and `c`,
   each as a `u16`.

## What it does not do

`lynxvm` does not execute bytecode. It has no interpreter loop and no stack
push or pop operations. It provides no command-line tool. `State.pc` and
`State.stack` are plain fields that nothing in the package advances or uses.

## Running the tests

```
pip install .[test]
pytest
```