"""Fields and methods of a class, with their attributes kept undecoded."""

from dataclasses import dataclass, field

from jclass.attributes import OriginAttribute

__all__ = ["FieldInfo", "MethodInfo"]


def _read_parts(reader, kind):
    access_flags = reader.read_u16(f"{kind} access flags")
    name = reader.read_u16(f"{kind} name")
    descriptor = reader.read_u16(f"{kind} descriptor")
    count = reader.read_u16(f"{kind} attribute count")
    attributes = [OriginAttribute.from_reader(reader) for _ in range(count)]
    return access_flags, name, descriptor, attributes


def _write_parts(member, writer, kind):
    writer.write_u16(f"{kind} access flags", member.access_flags)
    writer.write_u16(f"{kind} name", member.name)
    writer.write_u16(f"{kind} descriptor", member.descriptor)
    writer.write_u16(f"{kind} attribute count", len(member.attributes))
    for attribute in member.attributes:
        attribute.write_to(writer)


def _encoded_size(member):
    # three u16 fields, the attribute count, then the attributes
    return 8 + sum(attribute.byte_size() for attribute in member.attributes)


@dataclass
class FieldInfo:
    """A field: access flags, name and descriptor indexes, and attributes."""

    access_flags: int = 0
    name: int = 0
    descriptor: int = 0
    attributes: list = field(default_factory=list)

    @classmethod
    def from_reader(cls, reader):
        """Read a field entry from a DataReader."""
        access_flags, name, descriptor, attributes = _read_parts(reader, "field")
        return cls(access_flags, name, descriptor, attributes)

    def write_to(self, writer):
        """Write this field entry to a DataWriter."""
        _write_parts(self, writer, "field")

    def byte_size(self):
        """Number of bytes this field occupies when encoded."""
        return _encoded_size(self)


@dataclass
class MethodInfo:
    """A method: access flags, name and descriptor indexes, and attributes."""

    access_flags: int = 0
    name: int = 0
    descriptor: int = 0
    attributes: list = field(default_factory=list)

    @classmethod
    def from_reader(cls, reader):
        """Read a method entry from a DataReader."""
        access_flags, name, descriptor, attributes = _read_parts(reader, "method")
        return cls(access_flags, name, descriptor, attributes)

    def write_to(self, writer):
        """Write this method entry to a DataWriter."""
        _write_parts(self, writer, "method")

    def byte_size(self):
        """Number of bytes this method occupies when encoded."""
        return _encoded_size(self)