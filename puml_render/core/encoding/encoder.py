"""
PlantUML Encoder
================

Turns diagram source into the token PlantUML servers accept in a URL path:
UTF-8 bytes, raw DEFLATE at the highest compression level, then a base64
variant over the alphabet ``0-9 A-Z a-z - _``.

The decoding half is the exact inverse and is used to inspect tokens taken
from PlantUML URLs.
"""

import zlib

# Negative window bits select raw DEFLATE without zlib header or checksum.
_RAW_DEFLATE_WBITS = -15


class EncodingError(ValueError):
    """Exception raised for values outside the PlantUML 6-bit alphabet."""

    pass


def encode_6bit(value: int) -> str:
    """Map a 6-bit value (0-63) to its PlantUML alphabet character."""
    if value < 0 or value > 63:
        raise EncodingError(f"6-bit value out of range: {value}")
    if value < 10:
        return chr(48 + value)
    value -= 10
    if value < 26:
        return chr(65 + value)
    value -= 26
    if value < 26:
        return chr(97 + value)
    value -= 26
    if value == 0:
        return "-"
    return "_"


def decode_6bit(char: str) -> int:
    """Map a PlantUML alphabet character back to its 6-bit value."""
    if "0" <= char <= "9":
        return ord(char) - 48
    if "A" <= char <= "Z":
        return ord(char) - 65 + 10
    if "a" <= char <= "z":
        return ord(char) - 97 + 36
    if char == "-":
        return 62
    if char == "_":
        return 63
    raise EncodingError(f"Character not in PlantUML alphabet: {char!r}")


def encode_3bytes(b1: int, b2: int, b3: int) -> str:
    """Encode one 3-byte group as four characters."""
    c1 = b1 >> 2
    c2 = ((b1 & 0x3) << 4) | (b2 >> 4)
    c3 = ((b2 & 0xF) << 2) | (b3 >> 6)
    c4 = b3 & 0x3F
    return encode_6bit(c1) + encode_6bit(c2) + encode_6bit(c3) + encode_6bit(c4)


def encode64(data: bytes) -> str:
    """
    Encode bytes with the PlantUML base64 variant.

    Missing bytes in the final group are treated as zero. The result is
    always ``4 * ceil(len(data) / 3)`` characters long.
    """
    chunks = []
    for i in range(0, len(data), 3):
        group = data[i : i + 3]
        b2 = group[1] if len(group) > 1 else 0
        b3 = group[2] if len(group) > 2 else 0
        chunks.append(encode_3bytes(group[0], b2, b3))
    return "".join(chunks)


def decode64(token: str) -> bytes:
    """
    Decode a PlantUML base64 token.

    Returns three bytes per four characters, so the zero padding of the final
    group is included in the output.
    """
    if len(token) % 4:
        raise EncodingError(f"Token length must be a multiple of 4, got {len(token)}")

    result = bytearray()
    for i in range(0, len(token), 4):
        c1, c2, c3, c4 = (decode_6bit(char) for char in token[i : i + 4])
        result.append(((c1 << 2) | (c2 >> 4)) & 0xFF)
        result.append(((c2 << 4) | (c3 >> 2)) & 0xFF)
        result.append(((c3 << 6) | c4) & 0xFF)
    return bytes(result)


def deflate(data: bytes) -> bytes:
    """Compress with raw DEFLATE at the highest compression level."""
    compressor = zlib.compressobj(zlib.Z_BEST_COMPRESSION, zlib.DEFLATED, _RAW_DEFLATE_WBITS)
    return compressor.compress(data) + compressor.flush()


def inflate(data: bytes) -> bytes:
    """Decompress raw DEFLATE data, ignoring bytes after the end of stream."""
    decompressor = zlib.decompressobj(_RAW_DEFLATE_WBITS)
    return decompressor.decompress(data) + decompressor.flush()


def encode_diagram(text: str) -> str:
    """Encode diagram source into a PlantUML URL token."""
    return encode64(deflate(text.encode("utf-8")))


def decode_diagram(token: str) -> str:
    """Recover diagram source from a PlantUML URL token."""
    return inflate(decode64(token)).decode("utf-8")
