"""Bytecode file header: constants and instructions, and their binary form."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from lynxvm.instruction import INSTRUCTION_SIZE, Instruction
from lynxvm.value import Value, ValueKind

MAGIC_VALUE = 0x6C796E78

_U8 = struct.Struct("<B")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_I32 = struct.Struct("<i")
_F32 = struct.Struct("<f")

_PAYLOAD_SIZE = {
    ValueKind.BOOLEAN: _U8.size,
    ValueKind.INT: _I32.size,
    ValueKind.FLOAT: _F32.size,
}


class HeaderError(ValueError):
    """Raised when a header cannot be encoded or decoded."""


@dataclass
class Header:
    """A compiled unit: magic number, flags, constants and bytecode."""

    magic: int = MAGIC_VALUE
    flags: int = 0
    consts: list[Value] = field(default_factory=list)
    bytecode: list[Instruction] = field(default_factory=list)


def _value_size(value: Value) -> int:
    return _U8.size + _PAYLOAD_SIZE.get(value.kind, 0)


def header_size(header: Header) -> int:
    """Return the number of bytes header_encode produces for this header."""
    return (
        _U32.size
        + _U64.size
        + _U32.size
        + sum(_value_size(value) for value in header.consts)
        + _U32.size
        + INSTRUCTION_SIZE * len(header.bytecode)
    )


def _encode_value(value: Value) -> bytes:
    kind = _U8.pack(value.kind)
    if value.kind is ValueKind.BOOLEAN:
        return kind + _U8.pack(int(value.payload))
    if value.kind is ValueKind.INT:
        return kind + _I32.pack(value.payload)
    if value.kind is ValueKind.FLOAT:
        return kind + _F32.pack(value.payload)
    return kind


def header_encode(header: Header) -> bytes:
    """Serialise a header to its little-endian binary form."""
    if not 0 <= header.magic <= 0xFFFFFFFF:
        raise HeaderError(f"magic {header.magic:#x} is not a 32-bit number")
    if not 0 <= header.flags <= 0xFFFFFFFFFFFFFFFF:
        raise HeaderError(f"flags {header.flags:#x} are not a 64-bit number")

    out = bytearray()
    out += _U32.pack(header.magic)
    out += _U64.pack(header.flags)
    out += _U32.pack(len(header.consts))
    for value in header.consts:
        out += _encode_value(value)
    out += _U32.pack(len(header.bytecode))
    for insn in header.bytecode:
        out += insn.pack()
    return bytes(out)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._view = memoryview(bytes(data))
        self._offset = 0

    def take(self, size: int) -> bytes:
        end = self._offset + size
        if end > len(self._view):
            raise HeaderError(
                f"header truncated: need {size} bytes at offset {self._offset}"
            )
        chunk = self._view[self._offset:end].tobytes()
        self._offset = end
        return chunk

    def read(self, layout: struct.Struct):
        return layout.unpack(self.take(layout.size))[0]


def _decode_value(reader: _Reader) -> Value:
    kind = reader.read(_U8)
    if kind == ValueKind.INT:
        return Value(ValueKind.INT, reader.read(_I32))
    if kind == ValueKind.FLOAT:
        return Value(ValueKind.FLOAT, reader.read(_F32))
    if kind == ValueKind.BOOLEAN:
        return Value(ValueKind.BOOLEAN, bool(reader.read(_U8)))
    return Value.nil()


def header_decode(data: bytes) -> Header:
    """Parse a header from bytes produced by header_encode."""
    reader = _Reader(data)
    magic = reader.read(_U32)
    flags = reader.read(_U64)

    const_count = reader.read(_U32)
    consts = [_decode_value(reader) for _ in range(const_count)]

    insn_count = reader.read(_U32)
    bytecode = []
    for _ in range(insn_count):
        raw = reader.take(INSTRUCTION_SIZE)
        try:
            bytecode.append(Instruction.unpack(raw))
        except ValueError as exc:
            raise HeaderError(f"bad instruction: {exc}") from exc

    return Header(magic=magic, flags=flags, consts=consts, bytecode=bytecode)