"""Exception handling and error processing for IDNA operations.

This module provides the exception types raised by the ToASCII codec and an
error mapping helper used by the MCP tool layer. The codec itself only raises;
tools and the resolver convert those exceptions into user-friendly messages so
that a failed conversion is reported as a regular tool result.

The module serves three main purposes:
1. Define the two codec failure kinds (malformed input, undersized buffer)
2. Provide consistent error message formatting for codec errors
3. Map dnspython exceptions raised during lookups to human-readable messages
"""

import dns.exception
import dns.name
import dns.resolver


class IDNAError(Exception):
    """Base exception for IDNA ToASCII conversion errors."""


class InvalidEncoding(IDNAError):
    """Raised when the input holds a malformed or disallowed UTF-8 sequence.

    Attributes:
        offset (int): Byte offset of the rejected sequence in the input.
        length (int): Number of bytes the rejected sequence consumed.
    """

    def __init__(self, offset: int, length: int = 1) -> None:
        self.offset = offset
        self.length = length
        super().__init__(
            f"Invalid UTF-8 sequence at byte offset {offset} ({length} byte(s))"
        )


class BufferTooSmall(IDNAError):
    """Raised when the destination buffer cannot hold the encoded name.

    Attributes:
        capacity (int): Size of the destination buffer.
        required (int): Bytes needed at the failing write (a lower bound).
    """

    def __init__(self, capacity: int, required: int) -> None:
        self.capacity = capacity
        self.required = required
        super().__init__(
            f"Destination buffer too small: capacity {capacity}, need at least {required}"
        )


def handle_idna_error(error: Exception) -> str:
    """Convert codec and DNS related exceptions to descriptive error messages."""
    err_str = f"Unexpected error: {str(error)}"
    if isinstance(error, dns.exception.DNSException):
        err_str = f"DNS error: {str(error)}"
    if isinstance(error, InvalidEncoding):
        err_str = f"Malformed UTF-8 input at byte offset {error.offset}"
    if isinstance(error, BufferTooSmall):
        err_str = (
            f"Encoded name does not fit in {error.capacity} bytes "
            f"(at least {error.required} required)"
        )
    if isinstance(error, dns.resolver.NXDOMAIN):
        err_str = "Domain name does not exist"
    if isinstance(error, dns.resolver.NoAnswer):
        err_str = "No answer received from server"
    if isinstance(error, dns.resolver.NoNameservers):
        err_str = "No DNS servers responded"
    if isinstance(error, dns.name.LabelTooLong):
        err_str = "Domain name label too long"
    if isinstance(error, dns.name.NameTooLong):
        err_str = "Domain name too long"
    if isinstance(error, dns.exception.Timeout):
        err_str = "DNS query timed out"
    return err_str
