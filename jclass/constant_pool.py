"""Constant pool entries and the constant pool of a class file."""

import struct
from dataclasses import dataclass

from jclass.classfile_constants import ConstantTag
from jclass.errors import ClassFileError

__all__ = [
    "RefInfo",
    "Constant",
    "ConstantNull",
    "ConstantClass",
    "ConstantFieldref",
    "ConstantMethodref",
    "ConstantInterfaceMethodref",
    "ConstantString",
    "ConstantInteger",
    "ConstantFloat",
    "ConstantLong",
    "ConstantDouble",
    "ConstantNameAndType",
    "ConstantUtf8",
    "ConstantMethodHandle",
    "ConstantMethodType",
    "ConstantDynamic",
    "ConstantInvokeDynamic",
    "ConstantModule",
    "ConstantPackage",
    "read_constant",
    "ConstantPool",
]

_SIZES = {"u8": 1, "u16": 2, "i32": 4, "i64": 8, "f32": 4, "f64": 8}


def _f32_key(value):
    (bits,) = struct.unpack(">i", struct.pack(">f", value))
    return bits ^ ((bits >> 31) & 0x7FFFFFFF)


def _f64_key(value):
    (bits,) = struct.unpack(">q", struct.pack(">d", value))
    return bits ^ ((bits >> 63) & 0x7FFFFFFFFFFFFFFF)


@dataclass
class RefInfo:
    """A class index paired with a name-and-type index."""

    class_index: int
    name_type_index: int

    @classmethod
    def from_reader(cls, reader):
        class_index = reader.read_u16("ref: class index")
        name_type_index = reader.read_u16("ref: name type index")
        return cls(class_index, name_type_index)


class Constant:
    """Base of all constant pool entries.

    Entries compare, hash and order by tag first and then by their fields;
    floating point fields compare by their bit patterns in a total order.
    """

    _TAG = 0
    # (attribute, primitive kind, label) for each encoded field, in order.
    _LAYOUT = ()

    def tag(self):
        """Tag byte of this entry (0 for the null entry)."""
        return self._TAG

    @classmethod
    def _read(cls, reader):
        return cls(*(getattr(reader, f"read_{kind}")(label) for _, kind, label in cls._LAYOUT))

    def _write_fields(self, writer):
        for attr, kind, label in self._LAYOUT:
            getattr(writer, f"write_{kind}")(label, getattr(self, attr))

    def write_to(self, writer):
        """Write the tag byte and the fields; the null entry writes nothing."""
        if isinstance(self, ConstantNull):
            return
        writer.write_u8("constant type", int(self.tag()))
        self._write_fields(writer)

    def byte_size(self):
        """Encoded size including the tag byte; 0 for the null entry."""
        if isinstance(self, ConstantNull):
            return 0
        return 1 + sum(_SIZES[kind] for _, kind, _ in self._LAYOUT)

    def _fields_key(self):
        return tuple(getattr(self, attr) for attr, _, _ in self._LAYOUT)

    def _key(self):
        return (int(self.tag()),) + self._fields_key()

    def __eq__(self, other):
        if not isinstance(other, Constant):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __lt__(self, other):
        if not isinstance(other, Constant):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if not isinstance(other, Constant):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if not isinstance(other, Constant):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if not isinstance(other, Constant):
            return NotImplemented
        return self._key() >= other._key()


@dataclass(frozen=True, eq=False)
class ConstantNull(Constant):
    """Placeholder for slot 0 and the slot after a long or double."""

    _TAG = 0


@dataclass(frozen=True, eq=False)
class ConstantClass(Constant):
    name_index: int

    _TAG = ConstantTag.CLASS
    _LAYOUT = (("name_index", "u16", "Class constant"),)


@dataclass(frozen=True, eq=False)
class ConstantFieldref(Constant):
    class_index: int
    name_and_type_index: int

    _TAG = ConstantTag.FIELDREF
    _LAYOUT = (
        ("class_index", "u16", "ref: class index"),
        ("name_and_type_index", "u16", "ref: name index"),
    )


@dataclass(frozen=True, eq=False)
class ConstantMethodref(Constant):
    class_index: int
    name_and_type_index: int

    _TAG = ConstantTag.METHODREF
    _LAYOUT = ConstantFieldref._LAYOUT


@dataclass(frozen=True, eq=False)
class ConstantInterfaceMethodref(Constant):
    class_index: int
    name_and_type_index: int

    _TAG = ConstantTag.INTERFACE_METHODREF
    _LAYOUT = ConstantFieldref._LAYOUT


@dataclass(frozen=True, eq=False)
class ConstantString(Constant):
    string_index: int

    _TAG = ConstantTag.STRING
    _LAYOUT = (("string_index", "u16", "String constant"),)


@dataclass(frozen=True, eq=False)
class ConstantInteger(Constant):
    value: int

    _TAG = ConstantTag.INTEGER
    _LAYOUT = (("value", "i32", "Integer constant"),)


@dataclass(frozen=True, eq=False)
class ConstantFloat(Constant):
    value: float

    _TAG = ConstantTag.FLOAT
    _LAYOUT = (("value", "f32", "Float constant"),)

    def _fields_key(self):
        return (_f32_key(self.value),)


@dataclass(frozen=True, eq=False)
class ConstantLong(Constant):
    value: int

    _TAG = ConstantTag.LONG
    _LAYOUT = (("value", "i64", "Long constant"),)


@dataclass(frozen=True, eq=False)
class ConstantDouble(Constant):
    value: float

    _TAG = ConstantTag.DOUBLE
    _LAYOUT = (("value", "f64", "Double constant"),)

    def _fields_key(self):
        return (_f64_key(self.value),)


@dataclass(frozen=True, eq=False)
class ConstantNameAndType(Constant):
    name_index: int
    descriptor_index: int

    _TAG = ConstantTag.NAME_AND_TYPE
    _LAYOUT = (
        ("name_index", "u16", "name and type constant"),
        ("descriptor_index", "u16", "name and type constant"),
    )


@dataclass(frozen=True, eq=False)
class ConstantUtf8(Constant):
    value: str

    _TAG = ConstantTag.UTF8

    @classmethod
    def _read(cls, reader):
        raw = reader.read_bytes_with_pre_size("UTF8 string constant")
        try:
            return cls(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise ClassFileError(f"UTF8 constant read error: {exc}") from exc

    def _write_fields(self, writer):
        writer.write_bytes_with_pre_size("UTF8 string constant", self.value.encode("utf-8"))

    def byte_size(self):
        return 1 + 2 + len(self.value.encode("utf-8"))

    def _fields_key(self):
        return (self.value,)


@dataclass(frozen=True, eq=False)
class ConstantMethodHandle(Constant):
    reference_kind: int
    reference_index: int

    _TAG = ConstantTag.METHOD_HANDLE
    _LAYOUT = (
        ("reference_kind", "u8", "Method Handle constant"),
        ("reference_index", "u16", "Method Handle constant"),
    )


@dataclass(frozen=True, eq=False)
class ConstantMethodType(Constant):
    descriptor_index: int

    _TAG = ConstantTag.METHOD_TYPE
    _LAYOUT = (("descriptor_index", "u16", "MethodType constant"),)


@dataclass(frozen=True, eq=False)
class ConstantDynamic(Constant):
    bootstrap_method_attr_index: int
    name_and_type_index: int

    _TAG = ConstantTag.DYNAMIC
    _LAYOUT = (
        ("bootstrap_method_attr_index", "u16", "Dynamic constant"),
        ("name_and_type_index", "u16", "Dynamic constant"),
    )


@dataclass(frozen=True, eq=False)
class ConstantInvokeDynamic(Constant):
    bootstrap_method_attr_index: int
    name_and_type_index: int

    _TAG = ConstantTag.INVOKE_DYNAMIC
    _LAYOUT = (
        ("bootstrap_method_attr_index", "u16", "InvokeDynamic constant"),
        ("name_and_type_index", "u16", "InvokeDynamic constant"),
    )


@dataclass(frozen=True, eq=False)
class ConstantModule(Constant):
    name_index: int

    _TAG = ConstantTag.MODULE
    _LAYOUT = (("name_index", "u16", "module name constant"),)


@dataclass(frozen=True, eq=False)
class ConstantPackage(Constant):
    name_index: int

    _TAG = ConstantTag.PACKAGE
    _LAYOUT = (("name_index", "u16", "package name constant"),)


_BY_TAG = {
    int(kind._TAG): kind
    for kind in (
        ConstantNull,
        ConstantClass,
        ConstantFieldref,
        ConstantMethodref,
        ConstantInterfaceMethodref,
        ConstantString,
        ConstantInteger,
        ConstantFloat,
        ConstantLong,
        ConstantDouble,
        ConstantNameAndType,
        ConstantUtf8,
        ConstantMethodHandle,
        ConstantMethodType,
        ConstantDynamic,
        ConstantInvokeDynamic,
        ConstantModule,
        ConstantPackage,
    )
}


def read_constant(reader):
    """Read one tagged constant pool entry; a zero tag gives the null entry."""
    tag = reader.read_u8("constant type")
    kind = _BY_TAG.get(tag)
    if kind is None:
        raise ClassFileError(f"invalid constant type [{tag}]")
    return kind._read(reader)


class ConstantPool:
    """The constant pool: slot 0 is always the null entry."""

    def __init__(self):
        self._count = 0
        self._values = [ConstantNull()]
        self._cache = None

    @classmethod
    def from_reader(cls, reader):
        pool_count = reader.read_u16("constant pool")
        pool = cls()
        slot = 1
        while slot < pool_count:
            value = read_constant(reader)
            pool._append(value)
            if isinstance(value, (ConstantLong, ConstantDouble)):
                pool._append(ConstantNull())
                slot += 2
            else:
                slot += 1
        return pool

    def write_to(self, writer):
        writer.write_u16("constant pool length", len(self._values))
        for value in self._values:
            value.write_to(writer)

    def byte_size(self):
        """Encoded size: the u16 count and every entry."""
        return 2 + sum(value.byte_size() for value in self._values)

    def _lookup(self):
        if self._cache is None:
            self._cache = {value: index for index, value in enumerate(self._values)}
        return self._cache

    def _append(self, value):
        self._count += 1
        self._values.append(value)
        if self._cache is not None:
            self._cache[value] = self._count
        return self._count

    def add_constant(self, value):
        """Index of an equal entry if present, else append ``value`` and return its index."""
        index = self._lookup().get(value)
        if index is not None:
            return index
        return self._append(value)

    def get(self, index):
        """Entry at ``index``; indexes at or beyond :meth:`count` give the null entry."""
        if index >= self._count:
            return self._values[0]
        return self._values[index]

    def count(self):
        """Number of entries added after the initial null slot."""
        return self._count