"""Helpers turning short byte sequences into big-endian integers."""


def bytes_to_u16_be(data):
    """Big-endian u16 from the first two bytes; shorter input is zero-padded on the left."""
    return int.from_bytes(bytes(data[:2]), "big")


def bytes_to_u32_be(data):
    """Big-endian u32 from the first four bytes; shorter input is zero-padded on the left."""
    return int.from_bytes(bytes(data[:4]), "big")