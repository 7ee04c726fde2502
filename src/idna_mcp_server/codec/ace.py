"""IDNA ToASCII conversion of complete domain names.

Drives the UTF-8 decoder, the label splitter and the Bootstring encoder over a
whole name and writes the reassembled ACE name into a caller-supplied buffer.
"""

from typing import Iterator

from fastmcp.utilities.logging import get_logger

from ..exceptions import BufferTooSmall, InvalidEncoding
from .bootstring import encode_label
from .labels import split_labels
from .utf8 import INVALID_CODE_POINT, iter_code_points

logger = get_logger(__name__)

DEFAULT_BUFFER_SIZE = 256
SEPARATOR = b"."


class _BoundedWriter:
    """Write cursor over a caller-owned buffer that refuses to overflow it."""

    def __init__(self, dest) -> None:
        self.view = memoryview(dest)
        self.capacity = len(self.view)
        self.pos = 0

    def write(self, chunk: bytes) -> None:
        required = self.pos + len(chunk)
        if required > self.capacity:
            raise BufferTooSmall(self.capacity, required)
        self.view[self.pos:required] = chunk
        self.pos = required


def decode_strict(data: bytes) -> Iterator[int]:
    """Yield the code points of ``data``, raising on the first invalid sequence.

    Raises:
        InvalidEncoding: If any sequence is malformed or disallowed.
    """
    for code_point, offset, length in iter_code_points(data):
        if code_point == INVALID_CODE_POINT:
            logger.debug("Rejected UTF-8 sequence at offset %d (%d bytes)", offset, length)
            raise InvalidEncoding(offset, length)
        yield code_point


def idna_to_ascii(source: bytes, dest: bytearray) -> int:
    """Convert a UTF-8 domain name to its ACE form.

    Labels are separated by any of the four full stop variants and joined with
    an ASCII ``.`` in the output. Labels made of ASCII only are copied as they
    are, so converting an already converted name gives the same bytes.

    Args:
        source: Bytes-like object holding the UTF-8 encoded name.
        dest: Writable bytes-like object receiving the ACE name. Its length is
            the capacity; no terminator is written.

    Returns:
        int: Number of bytes written to ``dest``.

    Raises:
        InvalidEncoding: If the input holds a malformed UTF-8 sequence.
        BufferTooSmall: If the ACE name does not fit into ``dest``.
    """
    writer = _BoundedWriter(dest)
    first = True
    for label in split_labels(decode_strict(memoryview(source))):
        if not first:
            writer.write(SEPARATOR)
        writer.write(encode_label(label).encode("ascii"))
        first = False
    return writer.pos


def to_ascii(name: str | bytes, capacity: int | None = None) -> str:
    """Convert a domain name to its ACE form and return it as text.

    Args:
        name: Domain name as ``str`` or UTF-8 bytes.
        capacity: Size of the scratch buffer. Defaults to DEFAULT_BUFFER_SIZE.

    Returns:
        str: The ACE domain name.
    """
    if isinstance(name, str):
        # Lone surrogates are passed through so the decoder rejects them.
        source = name.encode("utf-8", "surrogatepass")
    else:
        source = bytes(name)
    buffer = bytearray(DEFAULT_BUFFER_SIZE if capacity is None else capacity)
    written = idna_to_ascii(source, buffer)
    return buffer[:written].decode("ascii")
