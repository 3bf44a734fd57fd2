"""Raw attributes and the decoded Code attribute."""

import io
from dataclasses import dataclass, field

from jclass.datastream import DataReader, DataWriter

__all__ = [
    "OriginAttribute",
    "ExceptionTableEntry",
    "ExceptionTable",
    "CodeAttribute",
]


@dataclass
class OriginAttribute:
    """An attribute kept as its name index and undecoded payload."""

    name: int
    data: bytes = b""

    @classmethod
    def from_reader(cls, reader):
        name = reader.read_u16("attribute name")
        length = reader.read_i32("attribute data length")
        data = reader.read_bytes("attribute data", length)
        return cls(name=name, data=data)

    def write_to(self, writer):
        writer.write_u16("attribute name", self.name)
        writer.write_i32("attribute data length", len(self.data))
        writer.write_bytes("attribute data", self.data)

    def byte_size(self):
        """Encoded size: name index, length field and payload."""
        return 2 + 4 + len(self.data)


@dataclass
class ExceptionTableEntry:
    """One handler range of a method's exception table."""

    start_pc: int
    end_pc: int
    handler_pc: int
    catch_type: int

    @classmethod
    def from_reader(cls, reader):
        return cls(
            start_pc=reader.read_u16("start pc"),
            end_pc=reader.read_u16("end pc"),
            handler_pc=reader.read_u16("handler pc"),
            catch_type=reader.read_u16("catch type"),
        )

    def write_to(self, writer):
        writer.write_u16("start pc", self.start_pc)
        writer.write_u16("end pc", self.end_pc)
        writer.write_u16("handler pc", self.handler_pc)
        writer.write_u16("catch type", self.catch_type)

    def byte_size(self):
        """Encoded size of one entry: four u16 values."""
        return 8


@dataclass
class ExceptionTable:
    """A method's exception table."""

    entries: list = field(default_factory=list)

    @classmethod
    def from_reader(cls, reader):
        count = reader.read_u16("exception table size")
        return cls([ExceptionTableEntry.from_reader(reader) for _ in range(count)])

    def write_to(self, writer):
        writer.write_u16("exception table size", len(self.entries))
        for entry in self.entries:
            entry.write_to(writer)

    def byte_size(self):
        """Size of the entries alone, without the leading count."""
        return sum(entry.byte_size() for entry in self.entries)


@dataclass
class CodeAttribute:
    """The decoded payload of a ``Code`` attribute."""

    codes: bytes = b""
    max_stack: int = 0
    max_locals: int = 0
    exceptions: ExceptionTable = field(default_factory=ExceptionTable)
    attributes: list = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data):
        """Decode a ``Code`` attribute payload."""
        return cls.from_reader(DataReader(data))

    @classmethod
    def from_reader(cls, reader):
        max_stack = reader.read_u16("max stack")
        max_locals = reader.read_u16("max locals")
        code_length = reader.read_i32("code length")
        codes = reader.read_bytes("code", code_length)
        exceptions = ExceptionTable.from_reader(reader)
        count = reader.read_u16("attribute count")
        attributes = [OriginAttribute.from_reader(reader) for _ in range(count)]
        return cls(
            codes=codes,
            max_stack=max_stack,
            max_locals=max_locals,
            exceptions=exceptions,
            attributes=attributes,
        )

    def to_bytes(self):
        """Encode this attribute back into its payload bytes."""
        buffer = io.BytesIO()
        writer = DataWriter(buffer)
        writer.write_u16("max stack", self.max_stack)
        writer.write_u16("max locals", self.max_locals)
        writer.write_i32("code length", len(self.codes))
        writer.write_bytes("code", self.codes)
        self.exceptions.write_to(writer)
        writer.write_u16("attribute count", len(self.attributes))
        for attribute in self.attributes:
            attribute.write_to(writer)
        return buffer.getvalue()

    def byte_size(self):
        """Size estimate: code, max stack/locals, exception entries and attributes.

        The code length, exception count and attribute count fields are not included.
        """
        attrs_size = sum(attribute.byte_size() for attribute in self.attributes)
        return len(self.codes) + 4 + self.exceptions.byte_size() + attrs_size