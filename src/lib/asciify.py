"""
Conversion of 8-bit WordStar bytes into 7-bit ASCII

WordStar sets the top bit of the last character of each word (and of soft
carriage returns) to drive its own justification. Clearing it recovers plain
ASCII. An ASCII SUB (0x1A) byte marks the end of file; it and everything
after it are discarded.
"""

from typing import BinaryIO

from .log import LOG


ASCII_EOF = 0x1A   # End of File (EOF) marker
ASCII_MASK = 0x7F  # ASCII is a 7-bit code

_MASK_TABLE = bytes(byte & ASCII_MASK for byte in range(256))


def convert(buf: bytearray) -> bytearray:
    """
    Clear the top bit of each byte in place, stopping at an EOF marker

    The EOF check is made on the raw byte, so 0x9A (which masks to 0x1A) is
    not treated as end of file.

    Args:
        buf: Mutable buffer of 8-bit input bytes

    Returns:
        The converted prefix of buf, up to but not including the first EOF
        byte. A result shorter than buf means EOF was found.

    Example:
        >>> convert(bytearray([0x41, 0xC2, 0x43, 0x1A, 0x45]))
        bytearray(b'ABC')
    """
    count = buf.find(ASCII_EOF)
    if count < 0:
        count = len(buf)
    buf[:count] = buf[:count].translate(_MASK_TABLE)
    return buf[:count]


def file_convert(reader: BinaryIO, writer: BinaryIO, chunk_size: int = 8192) -> int:
    """
    Convert a whole byte stream, chunk by chunk

    Reading stops at the end of the input or as soon as a chunk comes back
    shorter than it went in (EOF marker found).

    Args:
        reader: Binary source of 8-bit bytes
        writer: Binary destination for 7-bit bytes
        chunk_size: Number of bytes requested per read

    Returns:
        Number of bytes written
    """
    total = 0
    while True:
        chunk = bytearray(reader.read(chunk_size))
        if not chunk:
            break
        converted = convert(chunk)
        writer.write(converted)
        total += len(converted)
        if len(converted) < len(chunk):
            LOG(f"EOF marker found after {total} bytes", level=3)
            break
    LOG(f"Converted {total} bytes to 7-bit ASCII", level=2)
    return total
