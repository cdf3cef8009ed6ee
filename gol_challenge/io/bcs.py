"""Canonical binary serialization primitives (BCS layout).

Fixed-width unsigned integers are little-endian, booleans are a single
``0``/``1`` byte, and sequence lengths and enum variant indices are ULEB128.
Only canonical encodings are accepted when reading, so every value has
exactly one byte representation.
"""

from __future__ import annotations

import struct

MAX_ULEB128 = 0xFFFF_FFFF
"""Largest length or variant index accepted (BCS caps these at u32)."""

_INT_FORMATS = {1: "<B", 2: "<H", 4: "<I"}


class DeserializationError(ValueError):
    """Raised when bytes or JSON do not decode to a valid value."""


class Writer:
    """Append-only byte sink."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_uint(self, value: int, width: int) -> None:
        bits = width * 8
        if not 0 <= value < (1 << bits):
            raise ValueError(f"value {value} does not fit in u{bits}")
        self._buffer += struct.pack(_INT_FORMATS[width], value)

    def write_u8(self, value: int) -> None:
        self.write_uint(value, 1)

    def write_u16(self, value: int) -> None:
        self.write_uint(value, 2)

    def write_u32(self, value: int) -> None:
        self.write_uint(value, 4)

    def write_bool(self, value: bool) -> None:
        self.write_u8(1 if value else 0)

    def write_uleb128(self, value: int) -> None:
        if not 0 <= value <= MAX_ULEB128:
            raise ValueError(f"value {value} out of ULEB128 range")
        while True:
            byte = value & 0x7F
            value >>= 7
            if value:
                self._buffer.append(byte | 0x80)
            else:
                self._buffer.append(byte)
                return

    def write_str(self, value: str) -> None:
        data = value.encode("utf-8")
        self.write_uleb128(len(data))
        self._buffer += data

    def getvalue(self) -> bytes:
        return bytes(self._buffer)


class Reader:
    """Cursor over an immutable byte string."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._offset = 0

    def _take(self, n: int) -> bytes:
        end = self._offset + n
        if end > len(self._data):
            raise DeserializationError(
                f"unexpected end of input at offset {self._offset} (needed {n} bytes)"
            )
        chunk = self._data[self._offset : end]
        self._offset = end
        return chunk

    def read_uint(self, width: int) -> int:
        return struct.unpack(_INT_FORMATS[width], self._take(width))[0]

    def read_u8(self) -> int:
        return self.read_uint(1)

    def read_u16(self) -> int:
        return self.read_uint(2)

    def read_u32(self) -> int:
        return self.read_uint(4)

    def read_bool(self) -> bool:
        byte = self.read_u8()
        if byte > 1:
            raise DeserializationError(f"invalid boolean byte {byte:#04x}")
        return byte == 1

    def read_uleb128(self) -> int:
        value = 0
        shift = 0
        while True:
            byte = self.read_u8()
            value |= (byte & 0x7F) << shift
            if not byte & 0x80:
                if byte == 0 and shift > 0:
                    raise DeserializationError("non-canonical ULEB128 encoding")
                break
            shift += 7
            if shift > 28:
                raise DeserializationError("ULEB128 value too long")
        if value > MAX_ULEB128:
            raise DeserializationError(f"ULEB128 value {value} exceeds u32")
        return value

    def read_str(self) -> str:
        length = self.read_uleb128()
        raw = self._take(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DeserializationError(f"invalid UTF-8 string: {exc}") from exc

    def finish(self) -> None:
        """Require that every byte was consumed."""
        remaining = len(self._data) - self._offset
        if remaining:
            raise DeserializationError(f"{remaining} trailing bytes after value")
