import io
import struct

import pytest

from jclass.attributes import CodeAttribute, ExceptionTableEntry
from jclass.classfile import JCLASS_MAGIC, JClassInfo
from jclass.constant_pool import ConstantLong, ConstantNull, ConstantString, ConstantUtf8
from jclass.datastream import DataReader, DataWriter
from jclass.errors import ClassFileError
from jclass.tags import CODE_TAG

CODE_BYTES = bytes([0x2A, 0xB7, 0x00, 0x01, 0xB1])
LONG_VALUE = 1234567890123


def _u16(value):
    return struct.pack(">H", value)


def _u32(value):
    return struct.pack(">I", value)


def _utf8(text):
    raw = text.encode("utf-8")
    return b"\x01" + _u16(len(raw)) + raw


def _code_payload():
    return (
        _u16(1) + _u16(1) + _u32(len(CODE_BYTES)) + CODE_BYTES
        + _u16(1) + _u16(0) + _u16(5) + _u16(5) + _u16(0)
        + _u16(0)
    )


def _build(magic=JCLASS_MAGIC):
    pool = [
        _utf8("Test"),
        b"\x07" + _u16(1),
        _utf8("java/lang/Object"),
        b"\x07" + _u16(3),
        _utf8("Code"),
        _utf8("<init>"),
        _utf8("()V"),
        b"\x05" + struct.pack(">q", LONG_VALUE),
        _utf8("InnerClasses"),
        _utf8("value"),
        _utf8("I"),
    ]
    payload = _code_payload()
    field_bytes = _u16(2) + _u16(11) + _u16(12) + _u16(0)
    method_bytes = _u16(1) + _u16(6) + _u16(7) + _u16(1) + _u16(5) + _u32(len(payload)) + payload
    return (
        _u32(magic) + _u16(0) + _u16(65)
        + _u16(13) + b"".join(pool)
        + _u16(0x21) + _u16(2) + _u16(4)
        + _u16(1) + _u16(4)
        + _u16(1) + field_bytes
        + _u16(1) + method_bytes
        + _u16(1) + _u16(10) + _u32(2) + _u16(0)
    )


def test_parse_header_and_members():
    info = JClassInfo.from_bytes(_build())
    assert info.magic == JCLASS_MAGIC
    assert info.major_version == 65
    assert info.minor_version == 0
    assert info.access_flags == 0x21
    assert info.class_index == 2
    assert info.superclass_index == 4
    assert info.interfaces == [4]
    assert [(f.name, f.descriptor) for f in info.fields] == [(11, 12)]
    assert [(m.name, m.descriptor) for m in info.methods] == [(6, 7)]
    assert info.attributes[0].name == 10
    assert info.attributes[0].data == b"\x00\x00"


def test_constant_pool_long_takes_two_slots():
    info = JClassInfo.from_bytes(_build())
    pool = info.constant_pool
    assert pool.count() == 12
    assert pool.get(8) == ConstantLong(LONG_VALUE)
    assert pool.get(9) == ConstantNull()
    assert pool.get(5) == ConstantUtf8("Code")


def test_from_reader_on_stream():
    info = JClassInfo.from_reader(DataReader(io.BytesIO(_build())))
    assert info.class_index == 2


def test_to_bytes_round_trip_and_size():
    data = _build()
    info = JClassInfo.from_bytes(data)
    assert info.to_bytes() == data
    assert info.byte_size() == len(data)


def test_write_to_writer_matches_to_bytes():
    info = JClassInfo.from_bytes(_build())
    buffer = io.BytesIO()
    info.write_to(DataWriter(buffer))
    assert buffer.getvalue() == info.to_bytes()


def test_code_attributes_decode_and_round_trip():
    info = JClassInfo.from_bytes(_build())
    pool = info.constant_pool
    code_indexes = set()
    for index in range(pool.count()):
        value = pool.get(index)
        if isinstance(value, ConstantString):
            target = pool.get(value.string_index)
            if isinstance(target, ConstantUtf8) and target.value == CODE_TAG:
                code_indexes.add(index)
        elif isinstance(value, ConstantUtf8) and value.value == CODE_TAG:
            code_indexes.add(index)
    assert code_indexes == {5}
    found = 0
    for method in info.methods:
        for attribute in method.attributes:
            if attribute.name in code_indexes:
                code = CodeAttribute.from_bytes(attribute.data)
                assert code.codes == CODE_BYTES
                assert code.exceptions.entries == [ExceptionTableEntry(0, 5, 5, 0)]
                assert code.to_bytes() == attribute.data
                found += 1
    assert found == 1


def test_bad_magic_raises():
    with pytest.raises(ClassFileError):
        JClassInfo.from_bytes(_build(magic=0xDEADBEEF))


def test_truncated_data_raises():
    data = _build()
    with pytest.raises(ClassFileError):
        JClassInfo.from_bytes(data[:-3])


def test_default_writes_standard_magic():
    encoded = JClassInfo().to_bytes()
    assert encoded[:4] == b"\xca\xfe\xba\xbe"
    parsed = JClassInfo.from_bytes(encoded)
    assert parsed.magic == JCLASS_MAGIC
    assert parsed.constant_pool.count() == 0
    assert len(encoded) == JClassInfo().byte_size()