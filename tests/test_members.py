import io

import pytest

from jclass.attributes import OriginAttribute
from jclass.datastream import DataReader, DataWriter
from jclass.errors import ClassFileError
from jclass.members import FieldInfo, MethodInfo


def _encode(member):
    buffer = io.BytesIO()
    member.write_to(DataWriter(buffer))
    return buffer.getvalue()


def test_field_wire_bytes_without_attributes():
    info = FieldInfo(access_flags=1, name=2, descriptor=3, attributes=[])
    assert _encode(info) == b"\x00\x01\x00\x02\x00\x03\x00\x00"


def test_method_reads_attributes():
    data = (
        b"\x00\x09\x00\x04\x00\x05\x00\x01"
        + b"\x00\x06\x00\x00\x00\x03abc"
    )
    info = MethodInfo.from_reader(DataReader(data))
    assert info.access_flags == 9
    assert info.name == 4
    assert info.descriptor == 5
    assert info.attributes == [OriginAttribute(name=6, data=b"abc")]


@pytest.mark.parametrize("kind", [FieldInfo, MethodInfo])
def test_round_trip(kind):
    original = kind(
        access_flags=0x0011,
        name=7,
        descriptor=8,
        attributes=[OriginAttribute(9, b"\x01\x02"), OriginAttribute(10, b"")],
    )
    encoded = _encode(original)
    decoded = kind.from_reader(DataReader(encoded))
    assert decoded == original


@pytest.mark.parametrize("kind", [FieldInfo, MethodInfo])
def test_byte_size_matches_encoding(kind):
    info = kind(
        access_flags=2,
        name=3,
        descriptor=4,
        attributes=[OriginAttribute(5, b"xyz"), OriginAttribute(6, b"\x00" * 10)],
    )
    assert info.byte_size() == len(_encode(info))


@pytest.mark.parametrize("kind", [FieldInfo, MethodInfo])
def test_truncated_input_raises(kind):
    data = b"\x00\x01\x00\x02\x00\x03\x00\x01\x00\x04\x00\x00\x00\x05ab"
    with pytest.raises(ClassFileError):
        kind.from_reader(DataReader(data))