"""Fast offset scan of raw class file bytes without building a full model."""

from dataclasses import dataclass, field
from typing import Optional

from jclass.classfile_constants import ConstantTag
from jclass.errors import ClassFileError

__all__ = [
    "DataRange",
    "SimpleClassInfo",
    "fast_scan_class",
    "handle_field_or_method",
    "get_u16_from_data",
    "get_u32_from_data",
]

_CODE_ATTR_NAME = b"Code"

_NAME_MATCH = 1
_CODE_MATCH = 2
_WIDE_CONSTANT = 3

_FIXED_SIZES = {
    ConstantTag.INTEGER: 4,
    ConstantTag.FLOAT: 4,
    ConstantTag.CLASS: 2,
    ConstantTag.STRING: 2,
    ConstantTag.MODULE: 2,
    ConstantTag.PACKAGE: 2,
    ConstantTag.METHOD_TYPE: 2,
    ConstantTag.FIELDREF: 4,
    ConstantTag.METHODREF: 4,
    ConstantTag.INTERFACE_METHODREF: 4,
    ConstantTag.NAME_AND_TYPE: 4,
    ConstantTag.DYNAMIC: 4,
    ConstantTag.INVOKE_DYNAMIC: 4,
    ConstantTag.METHOD_HANDLE: 3,
}


@dataclass
class DataRange:
    """A half-open byte range ``[start, end)``."""

    start: int
    end: int


@dataclass
class SimpleClassInfo:
    """Byte offsets found by :func:`fast_scan_class`.

    ``consts[0]`` is where the first constant starts; every later element is
    the offset just past the constant with that index.
    """

    consts: list = field(default_factory=list)
    fields_start: int = 0
    methods_start: int = 0
    method_codes: list = field(default_factory=list)
    attributes_start: int = 0
    specify_attribute: Optional[DataRange] = None


def get_u16_from_data(data, index):
    """Big-endian u16 at ``index``; returns ``(value, next_index)``."""
    end = index + 2
    if end > len(data):
        raise ClassFileError("u16 read out of bounds")
    return int.from_bytes(data[index:end], "big"), end


def get_u32_from_data(data, index):
    """Big-endian u32 at ``index``; returns ``(value, next_index)``."""
    end = index + 4
    if end > len(data):
        raise ClassFileError("u32 read out of bounds")
    return int.from_bytes(data[index:end], "big"), end


def _skip_attributes(data, index):
    count, index = get_u16_from_data(data, index)
    for _ in range(count):
        index += 2
        size, index = get_u32_from_data(data, index)
        index += size
    return index


def handle_field_or_method(data, index):
    """Skip a field or method table starting at ``index``; returns the offset after it."""
    count, index = get_u16_from_data(data, index)
    for _ in range(count):
        index += 6
        index = _skip_attributes(data, index)
    return index


def _scan_constant(data, index, attribute_name, name_found, find_code):
    """Skip one constant; returns ``(kind, next_index)``."""
    if index >= len(data):
        raise ClassFileError("constant type read out of bounds")
    tag = data[index]
    index += 1
    if tag == ConstantTag.UTF8:
        size, index = get_u16_from_data(data, index)
        if find_code and size == len(_CODE_ATTR_NAME):
            end = index + len(_CODE_ATTR_NAME)
            if end > len(data):
                raise ClassFileError("utf8 read out of bounds")
            if data[index:end] == _CODE_ATTR_NAME:
                return _CODE_MATCH, end
        if name_found or size != len(attribute_name):
            return 0, index + size
        end = index + size
        if end > len(data):
            raise ClassFileError("utf8 read out of bounds")
        return (_NAME_MATCH if data[index:end] == attribute_name else 0), end
    if tag in (ConstantTag.LONG, ConstantTag.DOUBLE):
        return _WIDE_CONSTANT, index + 8
    return 0, index + _FIXED_SIZES.get(tag, 0)


def fast_scan_class(data, attribute_name, not_check_attr):
    """Locate constants, members, method Code attributes and one class attribute.

    Returns ``None`` when ``not_check_attr`` is false and no UTF8 constant
    equals ``attribute_name``. A UTF8 ``Code`` constant is claimed for the
    method code lookup before it is compared with ``attribute_name``.
    """
    data = bytes(data)
    attribute_name = bytes(attribute_name)
    index = 8
    constant_size, index = get_u16_from_data(data, index)
    if constant_size == 0:
        raise ClassFileError("constant pool count is zero")
    consts = [0] * constant_size
    consts[0] = index
    name_found = bool(not_check_attr)
    data_key_index = 0
    find_code = True
    code_index = 0

    slot = 1
    while slot < constant_size:
        kind, index = _scan_constant(data, index, attribute_name, name_found, find_code)
        if kind == _NAME_MATCH:
            name_found = True
            data_key_index = slot
        elif kind == _CODE_MATCH:
            find_code = False
            code_index = slot
        elif kind == _WIDE_CONSTANT:
            if slot + 1 >= constant_size:
                raise ClassFileError("wide constant overruns the constant pool")
            consts[slot] = index
            consts[slot + 1] = index
            slot += 2
            continue
        consts[slot] = index
        slot += 1

    if not name_found:
        return None

    index += 6
    interface_count, index = get_u16_from_data(data, index)
    index += interface_count * 2

    fields_start = index
    index = handle_field_or_method(data, index)

    methods_start = index
    code_index_bytes = (code_index & 0xFFFF).to_bytes(2, "big")
    method_count, index = get_u16_from_data(data, index)
    method_codes = []
    for _ in range(method_count):
        index += 6
        attr_count, index = get_u16_from_data(data, index)
        code_range = (0, 0)
        for _ in range(attr_count):
            start = index
            index += 2
            size, index = get_u32_from_data(data, index)
            index += size
            if data[start:start + 2] == code_index_bytes:
                code_range = (start, index)
        method_codes.append(code_range)

    attributes_start = index
    attr_count, index = get_u16_from_data(data, index)
    specify_attribute = None
    key = data_key_index & 0xFFFF
    for _ in range(attr_count):
        name_index, index = get_u16_from_data(data, index)
        size, index = get_u32_from_data(data, index)
        start = index
        index += size
        if name_index == key:
            if index > len(data):
                raise ClassFileError("matched attribute content out of bounds")
            specify_attribute = DataRange(start, index)
            break

    return SimpleClassInfo(
        consts=consts,
        fields_start=fields_start,
        methods_start=methods_start,
        method_codes=method_codes,
        attributes_start=attributes_start,
        specify_attribute=specify_attribute,
    )