"""A whole class file: header, constant pool, members and attributes."""

import io
from dataclasses import dataclass, field

from jclass.attributes import OriginAttribute
from jclass.constant_pool import ConstantPool
from jclass.datastream import DataReader, DataWriter
from jclass.errors import ClassFileError
from jclass.members import FieldInfo, MethodInfo

__all__ = ["JCLASS_MAGIC", "JClassInfo"]

JCLASS_MAGIC = 0xCAFEBABE


@dataclass
class JClassInfo:
    """The parsed structure of a class file."""

    magic: int = 0
    minor_version: int = 0
    major_version: int = 0
    constant_pool: ConstantPool = field(default_factory=ConstantPool)
    access_flags: int = 0
    class_index: int = 0
    superclass_index: int = 0
    interfaces: list = field(default_factory=list)
    fields: list = field(default_factory=list)
    methods: list = field(default_factory=list)
    attributes: list = field(default_factory=list)

    @classmethod
    def from_reader(cls, reader):
        """Parse a class file from a :class:`DataReader`."""
        magic = reader.read_u32("magic")
        if magic != JCLASS_MAGIC:
            raise ClassFileError("data is not a class file")
        minor_version = reader.read_u16("minor version")
        major_version = reader.read_u16("major version")
        constant_pool = ConstantPool.from_reader(reader)
        access_flags = reader.read_u16("access flags")
        class_index = reader.read_u16("this class index")
        superclass_index = reader.read_u16("super class index")
        interface_count = reader.read_u16("interface count")
        interfaces = [reader.read_u16("interface index") for _ in range(interface_count)]
        field_count = reader.read_u16("field count")
        fields = [FieldInfo.from_reader(reader) for _ in range(field_count)]
        method_count = reader.read_u16("method count")
        methods = [MethodInfo.from_reader(reader) for _ in range(method_count)]
        attribute_count = reader.read_u16("attribute count")
        attributes = [OriginAttribute.from_reader(reader) for _ in range(attribute_count)]
        return cls(
            magic=magic,
            minor_version=minor_version,
            major_version=major_version,
            constant_pool=constant_pool,
            access_flags=access_flags,
            class_index=class_index,
            superclass_index=superclass_index,
            interfaces=interfaces,
            fields=fields,
            methods=methods,
            attributes=attributes,
        )

    @classmethod
    def from_bytes(cls, data):
        """Parse a class file held in memory."""
        return cls.from_reader(DataReader(data))

    def write_to(self, writer):
        """Write the class file; the magic number is always the standard one."""
        writer.write_u32("magic", JCLASS_MAGIC)
        writer.write_u16("minor version", self.minor_version)
        writer.write_u16("major version", self.major_version)
        self.constant_pool.write_to(writer)
        writer.write_u16("access flags", self.access_flags)
        writer.write_u16("this class index", self.class_index)
        writer.write_u16("super class index", self.superclass_index)
        writer.write_u16("interface count", len(self.interfaces))
        for interface in self.interfaces:
            writer.write_u16("interface index", interface)
        writer.write_u16("field count", len(self.fields))
        for member in self.fields:
            member.write_to(writer)
        writer.write_u16("method count", len(self.methods))
        for member in self.methods:
            member.write_to(writer)
        writer.write_u16("attribute count", len(self.attributes))
        for attribute in self.attributes:
            attribute.write_to(writer)

    def to_bytes(self):
        """Encode the class file into bytes."""
        buffer = io.BytesIO()
        self.write_to(DataWriter(buffer))
        return buffer.getvalue()

    def byte_size(self):
        """Encoded size of the whole class file."""
        return (
            4 + 2 + 2
            + self.constant_pool.byte_size()
            + 2 + 2 + 2
            + 2 + 2 * len(self.interfaces)
            + 2 + sum(member.byte_size() for member in self.fields)
            + 2 + sum(member.byte_size() for member in self.methods)
            + 2 + sum(attribute.byte_size() for attribute in self.attributes)
        )