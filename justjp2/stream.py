"""Big-endian byte access and simple read/write cursors."""

from __future__ import annotations


class OutOfBoundsError(IndexError):
    """Raised when an access runs past the end of a buffer."""

    def __init__(self, offset: int, length: int) -> None:
        super().__init__(f"out of bounds: offset {offset}, length {length}")
        self.offset = offset
        self.length = length


def _read(buf, offset: int, size: int) -> int:
    if offset < 0 or offset + size > len(buf):
        raise OutOfBoundsError(offset, size)
    return int.from_bytes(bytes(buf[offset:offset + size]), "big")


def _write(buf: bytearray, offset: int, size: int, val: int) -> None:
    if offset < 0 or offset + size > len(buf):
        raise OutOfBoundsError(offset, size)
    buf[offset:offset + size] = val.to_bytes(size, "big")


def read_u8(buf, offset: int) -> int:
    """Read an unsigned byte at offset."""
    return _read(buf, offset, 1)


def read_u16_be(buf, offset: int) -> int:
    """Read a big-endian 16-bit unsigned integer at offset."""
    return _read(buf, offset, 2)


def read_u32_be(buf, offset: int) -> int:
    """Read a big-endian 32-bit unsigned integer at offset."""
    return _read(buf, offset, 4)


def read_u64_be(buf, offset: int) -> int:
    """Read a big-endian 64-bit unsigned integer at offset."""
    return _read(buf, offset, 8)


def write_u8(buf: bytearray, offset: int, val: int) -> None:
    """Write an unsigned byte at offset."""
    _write(buf, offset, 1, val)


def write_u16_be(buf: bytearray, offset: int, val: int) -> None:
    """Write a big-endian 16-bit unsigned integer at offset."""
    _write(buf, offset, 2, val)


def write_u32_be(buf: bytearray, offset: int, val: int) -> None:
    """Write a big-endian 32-bit unsigned integer at offset."""
    _write(buf, offset, 4, val)


class SliceReader:
    """A read cursor over an immutable byte buffer."""

    def __init__(self, data) -> None:
        self._data = bytes(data)
        self._pos = 0

    def tell(self) -> int:
        """Current position."""
        return self._pos

    def remaining(self) -> int:
        """Number of bytes left after the current position."""
        return max(0, len(self._data) - self._pos)

    def _take(self, size: int) -> int:
        value = _read(self._data, self._pos, size)
        self._pos += size
        return value

    def read_u8(self) -> int:
        return self._take(1)

    def read_u16_be(self) -> int:
        return self._take(2)

    def read_u32_be(self) -> int:
        return self._take(4)

    def read_u64_be(self) -> int:
        return self._take(8)

    def read_bytes(self, n: int) -> bytes:
        """Read exactly n bytes."""
        end = self._pos + n
        if n < 0 or end > len(self._data):
            raise OutOfBoundsError(self._pos, n)
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def skip(self, n: int) -> None:
        """Advance by n bytes."""
        new_pos = self._pos + n
        if n < 0 or new_pos > len(self._data):
            raise OutOfBoundsError(self._pos, n)
        self._pos = new_pos

    def seek(self, pos: int) -> None:
        """Move to an absolute position; the end itself is allowed."""
        if pos < 0 or pos > len(self._data):
            raise OutOfBoundsError(pos, 0)
        self._pos = pos


class ByteWriter:
    """An append-only big-endian byte writer."""

    def __init__(self) -> None:
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def tell(self) -> int:
        """Current position, which is the number of bytes written."""
        return len(self._data)

    def write_u8(self, val: int) -> None:
        self._data += val.to_bytes(1, "big")

    def write_u16_be(self, val: int) -> None:
        self._data += val.to_bytes(2, "big")

    def write_u32_be(self, val: int) -> None:
        self._data += val.to_bytes(4, "big")

    def write_u64_be(self, val: int) -> None:
        self._data += val.to_bytes(8, "big")

    def write_bytes(self, data) -> None:
        self._data += data

    def getvalue(self) -> bytes:
        """Everything written so far."""
        return bytes(self._data)