"""Big-endian primitive readers and writers over binary streams."""

import io
import struct

from jclass.errors import ClassFileError

_U8 = struct.Struct(">B")
_I8 = struct.Struct(">b")
_U16 = struct.Struct(">H")
_I16 = struct.Struct(">h")
_U32 = struct.Struct(">I")
_I32 = struct.Struct(">i")
_U64 = struct.Struct(">Q")
_I64 = struct.Struct(">q")
_F32 = struct.Struct(">f")
_F64 = struct.Struct(">d")


def _as_stream(source):
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source))
    return source


class DataReader:
    """Reads big-endian values from a binary stream or a bytes-like object.

    Every read takes a ``name`` describing the value, used in error messages.
    """

    def __init__(self, stream):
        self.stream = _as_stream(stream)

    def read_bytes(self, name, size):
        """Read exactly ``size`` bytes or raise :class:`ClassFileError`."""
        if size < 0:
            raise ClassFileError(f"{name}: read failed: negative length {size}")
        chunks = []
        remaining = size
        while remaining:
            try:
                chunk = self.stream.read(remaining)
            except OSError as exc:
                raise ClassFileError(f"{name}: read failed: {exc}") from exc
            if not chunk:
                raise ClassFileError(f"{name}: read failed: unexpected end of data")
            chunks.append(bytes(chunk))
            remaining -= len(chunk)
        return b"".join(chunks)

    def read_bytes_with_pre_size(self, name):
        """Read a u16 length followed by that many bytes."""
        size = self.read_u16(name)
        return self.read_bytes(name, size)

    def _unpack(self, name, layout):
        return layout.unpack(self.read_bytes(name, layout.size))[0]

    def read_u8(self, name):
        return self._unpack(name, _U8)

    def read_i8(self, name):
        return self._unpack(name, _I8)

    def read_u16(self, name):
        return self._unpack(name, _U16)

    def read_i16(self, name):
        return self._unpack(name, _I16)

    def read_u32(self, name):
        return self._unpack(name, _U32)

    def read_i32(self, name):
        return self._unpack(name, _I32)

    def read_u64(self, name):
        return self._unpack(name, _U64)

    def read_i64(self, name):
        return self._unpack(name, _I64)

    def read_f32(self, name):
        return self._unpack(name, _F32)

    def read_f64(self, name):
        return self._unpack(name, _F64)


class DataWriter:
    """Writes big-endian values to a binary stream.

    Every write takes a ``name`` describing the value, used in error messages.
    """

    def __init__(self, stream):
        self.stream = stream

    def write_bytes(self, name, data):
        """Write all of ``data`` or raise :class:`ClassFileError`."""
        view = memoryview(bytes(data))
        while view:
            try:
                written = self.stream.write(view)
            except OSError as exc:
                raise ClassFileError(f"{name}: write failed: {exc}") from exc
            if written is None:
                written = len(view)
            if written <= 0:
                raise ClassFileError(f"{name}: write failed: stream accepted no data")
            view = view[written:]

    def write_bytes_with_pre_size(self, name, data):
        """Write a u16 length followed by ``data``."""
        data = bytes(data)
        if len(data) > 0xFFFF:
            raise ClassFileError(
                f"{name}: length write failed: {len(data)} bytes exceed a u16 length"
            )
        self.write_bytes(name, _U16.pack(len(data)))
        self.write_bytes(name, data)

    def _pack(self, name, layout, value):
        try:
            packed = layout.pack(value)
        except struct.error as exc:
            raise ClassFileError(f"{name}: write failed: {exc}") from exc
        self.write_bytes(name, packed)

    def write_u8(self, name, value):
        self._pack(name, _U8, value)

    def write_i8(self, name, value):
        self._pack(name, _I8, value)

    def write_u16(self, name, value):
        self._pack(name, _U16, value)

    def write_i16(self, name, value):
        self._pack(name, _I16, value)

    def write_u32(self, name, value):
        self._pack(name, _U32, value)

    def write_i32(self, name, value):
        self._pack(name, _I32, value)

    def write_u64(self, name, value):
        self._pack(name, _U64, value)

    def write_i64(self, name, value):
        self._pack(name, _I64, value)

    def write_f32(self, name, value):
        self._pack(name, _F32, value)

    def write_f64(self, name, value):
        self._pack(name, _F64, value)