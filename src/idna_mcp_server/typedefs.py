"""Type definitions for IDN conversion and lookup operations.

This module provides the dataclasses used as structured results throughout the
IDNA Model Context Protocol (MCP) server. Tools return a ToolResult, the
resolver returns a QueryResult and the UTF-8 inspector describes every decoded
sequence with a CodePointInfo.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

import dns.message
import dns.name
import dns.rdatatype


@dataclass
class QueryResult:
    """Stores the result of a DNS query for a converted hostname.
    details:
        'ace_name': the ACE form the query was sent for,
        'answer_count': len(response.answer),
        'is_truncated': bool(response.flags & dns.flags.TC)
    """

    success: bool
    qname: dns.name.Name | None = None
    rdtype: dns.rdatatype.RdataType | None = None
    response: dns.message.Message | None = None
    error: str | None = None
    rcode: int | None = None
    rcode_text: str | None = None
    duration: float | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolResult:
    """Stores the result of an IDN tool operation."""

    success: bool
    output: str | list[str] | dict[str, Any] | list[dict[str, Any]] | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class CodePointInfo:
    """One attempted UTF-8 sequence as seen by the decoder."""

    offset: int
    length: int
    valid: bool
    code_point: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
