import io
import math

import pytest

from jclass.datastream import DataReader, DataWriter
from jclass.errors import ClassFileError

ROUND_TRIP_CASES = [
    ("u8", 0),
    ("u8", 255),
    ("i8", -128),
    ("i8", 127),
    ("u16", 0xFFFF),
    ("i16", -32768),
    ("u32", 0xCAFEBABE),
    ("i32", -(2**31)),
    ("i32", 2**31 - 1),
    ("u64", 2**64 - 1),
    ("i64", -(2**63)),
    ("f32", 0.5),
    ("f32", -1.25),
    ("f64", math.pi),
    ("f64", -0.0),
]


def _write(kind, value):
    buf = io.BytesIO()
    getattr(DataWriter(buf), f"write_{kind}")("value", value)
    return buf.getvalue()


@pytest.mark.parametrize("kind,value", ROUND_TRIP_CASES)
def test_round_trip(kind, value):
    data = _write(kind, value)
    result = getattr(DataReader(data), f"read_{kind}")("value")
    assert result == value


@pytest.mark.parametrize(
    "kind,size",
    [("u8", 1), ("i8", 1), ("u16", 2), ("i16", 2), ("u32", 4), ("i32", 4),
     ("u64", 8), ("i64", 8), ("f32", 4), ("f64", 8)],
)
def test_widths_match_primitive_sizes(kind, size):
    assert len(_write(kind, 1)) == size


def test_magic_is_written_big_endian():
    assert _write("u32", 0xCAFEBABE) == b"\xca\xfe\xba\xbe"


def test_signed_and_unsigned_share_bits():
    data = _write("i16", -1)
    assert DataReader(data).read_u16("value") == 0xFFFF


def test_pre_sized_bytes_round_trip():
    buf = io.BytesIO()
    writer = DataWriter(buf)
    writer.write_bytes_with_pre_size("utf8", "Code".encode())
    writer.write_u8("tail", 7)
    reader = DataReader(buf.getvalue())
    assert reader.read_bytes_with_pre_size("utf8") == b"Code"
    assert reader.read_u8("tail") == 7


def test_pre_size_prefix_is_length():
    buf = io.BytesIO()
    DataWriter(buf).write_bytes_with_pre_size("utf8", b"abc")
    assert DataReader(buf.getvalue()).read_u16("len") == 3


def test_empty_pre_sized_bytes():
    buf = io.BytesIO()
    DataWriter(buf).write_bytes_with_pre_size("utf8", b"")
    assert DataReader(buf.getvalue()).read_bytes_with_pre_size("utf8") == b""


def test_pre_size_too_long_raises():
    with pytest.raises(ClassFileError):
        DataWriter(io.BytesIO()).write_bytes_with_pre_size("utf8", b"x" * 0x10000)


def test_short_read_raises_with_name():
    with pytest.raises(ClassFileError, match="Integer"):
        DataReader(b"\x00\x01").read_i32("Integer")


def test_truncated_pre_sized_bytes_raise():
    with pytest.raises(ClassFileError):
        DataReader(b"\x00\x05ab").read_bytes_with_pre_size("utf8")


def test_read_from_stream_object_advances():
    reader = DataReader(io.BytesIO(b"\x01\x02\x03"))
    assert reader.read_bytes("a", 2) == b"\x01\x02"
    assert reader.read_u8("b") == 3
    with pytest.raises(ClassFileError):
        reader.read_u8("c")


class _Trickle(io.RawIOBase):
    def __init__(self, data):
        self._data = data

    def readable(self):
        return True

    def read(self, size=-1):
        chunk, self._data = self._data[:1], self._data[1:]
        return chunk


def test_reads_complete_from_partial_stream():
    data = _write("u64", 2**40 + 3)
    assert DataReader(_Trickle(data)).read_u64("value") == 2**40 + 3


@pytest.mark.parametrize(
    "kind,value", [("u8", 256), ("u8", -1), ("u16", 0x10000), ("i32", 2**31)]
)
def test_out_of_range_write_raises(kind, value):
    with pytest.raises(ClassFileError):
        getattr(DataWriter(io.BytesIO()), f"write_{kind}")("value", value)


class _Broken:
    def write(self, data):
        raise OSError("disk full")


def test_stream_error_becomes_class_file_error():
    with pytest.raises(ClassFileError, match="attr"):
        DataWriter(_Broken()).write_u16("attr", 1)


def test_sequence_of_writes_reads_back_in_order():
    buf = io.BytesIO()
    writer = DataWriter(buf)
    writer.write_u16("a", 52)
    writer.write_i64("b", -9)
    writer.write_f64("c", 2.5)
    writer.write_bytes("d", b"xyz")
    reader = DataReader(buf.getvalue())
    assert reader.read_u16("a") == 52
    assert reader.read_i64("b") == -9
    assert reader.read_f64("c") == 2.5
    assert reader.read_bytes("d", 3) == b"xyz"