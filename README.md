# jclass

Read, inspect, edit and write Java `.class` files in pure Python, with no dependencies outside the standard library.

The package parses a class file into plain Python objects. You can change those objects and write them back out, byte for byte. Attributes stay as raw bytes (`OriginAttribute`). A `Code` attribute payload can be decoded into a `CodeAttribute`, which gives you the bytecode, the exception table and the nested attributes. There is also a fast scanner that finds the byte offsets of class file sections without building the full model.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parsing and writing a class

```python
from jclass.classfile import JClassInfo

with open("Example.class", "rb") as fh:
    info = JClassInfo.from_bytes(fh.read())

print(info.major_version, info.minor_version)
print(len(info.fields), "fields,", len(info.methods), "methods")

data = info.to_bytes()
assert len(data) == info.byte_size()
```

`JClassInfo.from_reader` and `JClassInfo.write_to` work with any binary stream:

- `from_reader` takes a `jclass.datastream.DataReader`, which wraps a binary stream or a bytes-like object.
- `write_to` takes a `DataWriter`, which wraps a writable binary stream.
- When writing, the magic number is always `0xCAFEBABE` (`jclass.classfile.JCLASS_MAGIC`).

Fields and methods are `jclass.members.FieldInfo` and `MethodInfo`. Each holds:

- `access_flags`
- `name` and `descriptor`, which are constant pool indexes
- `attributes`, a list of `OriginAttribute`

`jclass.classfile_constants` provides enums for the numeric values of the format:

- `AccessFlag`
- `ConstantTag`
- `ArrayType`
- `RefKind`
- `VerificationItem`
- `SignatureChar`

## The constant pool

```python
from jclass.constant_pool import ConstantString, ConstantUtf8

pool = info.constant_pool
for index in range(1, pool.count()):
    constant = pool.get(index)
    if isinstance(constant, ConstantUtf8):
        print(index, constant.value)

# Adding a value returns its index; an equal entry already in the pool is reused.
text_index = pool.add_constant(ConstantUtf8("hello"))
string_index = pool.add_constant(ConstantString(text_index))
```

Each entry type is its own class: `ConstantClass`, `ConstantUtf8`, `ConstantMethodref`, `ConstantLong` and the rest, plus `ConstantNull` for empty slots.

- **Equality and ordering.** Entries compare and hash by tag and then by their fields. Float and double values compare by their bit patterns.
- **Two-slot entries.** Long and double entries take two slots. The second slot holds `ConstantNull`.
- **How `get` behaves.** `pool.get(index)` returns the entry at `index` only when `index` is below `pool.count()`. For any index at or beyond `count()` it returns the `ConstantNull` of slot 0.
- **Reading single entries.** `read_constant` reads one tagged entry from a `DataReader`.

## Method bodies

```python
from jclass.attributes import CodeAttribute
from jclass.constant_pool import ConstantUtf8
from jclass.tags import CODE_TAG

code_names = {
    index
    for index in range(pool.count())
    if pool.get(index) == ConstantUtf8(CODE_TAG)
}

for method in info.methods:
    for attribute in method.attributes:
        if attribute.name in code_names:
            code = CodeAttribute.from_bytes(attribute.data)
            print(code.max_stack, code.max_locals, len(code.codes))
            print(code.exceptions.entries)
            assert code.to_bytes() == attribute.data
```

`jclass.tags` holds the names of the standard attributes, such as `CODE_TAG` and `INNER_CLASSES_TAG`.

`jclass.opcodes` holds the opcode table:

- `Opcode` names every instruction.
- `stack_growth(opcode)` gives the net number of operand stack slots an instruction pushes. The value is negative when the instruction pops.
- Instructions whose effect depends on their operands are recorded as 0. This covers field access, invocations, `wide` and `multianewarray`.
- An unknown opcode raises `ValueError`.

## Fast scanning

```python
from jclass.class_scan import fast_scan_class

scan = fast_scan_class(data, b"InnerClasses", False)
if scan is not None:
    print(scan.consts[:5])
    print(scan.fields_start, scan.methods_start, scan.attributes_start)
    print(scan.method_codes)        # (start, end) of each method's Code attribute, or (0, 0)
    print(scan.specify_attribute)   # DataRange of the named class attribute's payload, or None
```

- `fast_scan_class` returns `None` when no UTF8 constant equals the attribute name. Pass `True` as the third argument to scan regardless.
- `consts[0]` is the offset where the first constant starts. Every later element is the offset just past the constant with that index.
- The helpers `get_u16_from_data`, `get_u32_from_data` and `handle_field_or_method` each take the data and an offset. They return the value read, or the offset that follows.

## Errors

Malformed input raises `jclass.errors.ClassFileError`. This covers:

- a wrong magic number
- an unknown constant tag
- truncated data or out-of-bounds offsets
- invalid UTF-8 in a string constant
- values too large for their field when writing

## What it does not do

- Attributes other than `Code` are not decoded. They are kept as their name index and raw bytes.
- Bytecode is not disassembled into instructions.
- Nothing is verified against the class file rules.
- There is no command-line tool. The package is a library only.