"""Numeric constants of the class file format: flags, tags, kinds and codes."""

from enum import IntEnum, IntFlag

CLASSFILE_MAJOR_VERSION = 65
CLASSFILE_MINOR_VERSION = 0

# Bit positions of the access flags.
ACC_PUBLIC_BIT = 0
ACC_PRIVATE_BIT = 1
ACC_PROTECTED_BIT = 2
ACC_STATIC_BIT = 3
ACC_FINAL_BIT = 4
ACC_SYNCHRONIZED_BIT = 5
ACC_SUPER_BIT = 5
ACC_VOLATILE_BIT = 6
ACC_BRIDGE_BIT = 6
ACC_TRANSIENT_BIT = 7
ACC_VARARGS_BIT = 7
ACC_NATIVE_BIT = 8
ACC_INTERFACE_BIT = 9
ACC_ABSTRACT_BIT = 10
ACC_STRICT_BIT = 11
ACC_SYNTHETIC_BIT = 12
ACC_ANNOTATION_BIT = 13
ACC_ENUM_BIT = 14


class AccessFlag(IntFlag):
    """Access and property flags of classes, fields and methods."""

    PUBLIC = 1 << ACC_PUBLIC_BIT
    PRIVATE = 1 << ACC_PRIVATE_BIT
    PROTECTED = 1 << ACC_PROTECTED_BIT
    STATIC = 1 << ACC_STATIC_BIT
    FINAL = 1 << ACC_FINAL_BIT
    SYNCHRONIZED = 1 << ACC_SYNCHRONIZED_BIT
    SUPER = 1 << ACC_SUPER_BIT
    VOLATILE = 1 << ACC_VOLATILE_BIT
    BRIDGE = 1 << ACC_BRIDGE_BIT
    TRANSIENT = 1 << ACC_TRANSIENT_BIT
    VARARGS = 1 << ACC_VARARGS_BIT
    NATIVE = 1 << ACC_NATIVE_BIT
    INTERFACE = 1 << ACC_INTERFACE_BIT
    ABSTRACT = 1 << ACC_ABSTRACT_BIT
    STRICT = 1 << ACC_STRICT_BIT
    SYNTHETIC = 1 << ACC_SYNTHETIC_BIT
    ANNOTATION = 1 << ACC_ANNOTATION_BIT
    ENUM = 1 << ACC_ENUM_BIT
    MODULE = 32768


class ConstantTag(IntEnum):
    """Tag byte of a constant pool entry."""

    UTF8 = 1
    UNICODE = 2
    INTEGER = 3
    FLOAT = 4
    LONG = 5
    DOUBLE = 6
    CLASS = 7
    STRING = 8
    FIELDREF = 9
    METHODREF = 10
    INTERFACE_METHODREF = 11
    NAME_AND_TYPE = 12
    METHOD_HANDLE = 15
    METHOD_TYPE = 16
    DYNAMIC = 17
    INVOKE_DYNAMIC = 18
    MODULE = 19
    PACKAGE = 20
    EXTERNAL_MAX = 20


class ArrayType(IntEnum):
    """Element type codes taken by the ``newarray`` instruction."""

    BOOLEAN = 4
    CHAR = 5
    FLOAT = 6
    DOUBLE = 7
    BYTE = 8
    SHORT = 9
    INT = 10
    LONG = 11


class RefKind(IntEnum):
    """Reference kinds of a method handle constant."""

    GET_FIELD = 1
    GET_STATIC = 2
    PUT_FIELD = 3
    PUT_STATIC = 4
    INVOKE_VIRTUAL = 5
    INVOKE_STATIC = 6
    INVOKE_SPECIAL = 7
    NEW_INVOKE_SPECIAL = 8
    INVOKE_INTERFACE = 9


class VerificationItem(IntEnum):
    """Verification type tags used in stack map frames."""

    TOP = 0
    INTEGER = 1
    FLOAT = 2
    DOUBLE = 3
    LONG = 4
    NULL = 5
    UNINITIALIZED_THIS = 6
    OBJECT = 7
    UNINITIALIZED = 8


class SignatureChar(IntEnum):
    """Characters with a meaning in field and method descriptors."""

    SLASH = ord("/")
    DOT = ord(".")
    SPECIAL = ord("<")
    ENDSPECIAL = ord(">")
    ARRAY = ord("[")
    BYTE = ord("B")
    CHAR = ord("C")
    CLASS = ord("L")
    ENDCLASS = ord(";")
    ENUM = ord("E")
    FLOAT = ord("F")
    DOUBLE = ord("D")
    FUNC = ord("(")
    ENDFUNC = ord(")")
    INT = ord("I")
    LONG = ord("J")
    SHORT = ord("S")
    VOID = ord("V")
    BOOLEAN = ord("Z")