"""UTF-8 byte sequence inspection tool."""

from idna_mcp_server.codec import INVALID_CODE_POINT, iter_code_points
from idna_mcp_server.typedefs import CodePointInfo, ToolResult


async def utf8_inspect_impl(hex_bytes: str) -> ToolResult:
    """Decode a hex encoded byte string one UTF-8 sequence at a time.

    Args:
        hex_bytes (str): Bytes as hex digits, whitespace allowed (e.g. "c3 a9 2e").

    Returns:
        ToolResult: One entry per attempted sequence with offset, length,
        code point and validity.
    """
    try:
        data = bytes.fromhex(hex_bytes)
    except ValueError as e:
        return ToolResult(success=False, error=f"Invalid hex input: {str(e)}")

    entries = []
    for code_point, offset, length in iter_code_points(data):
        valid = code_point != INVALID_CODE_POINT
        entries.append(
            CodePointInfo(
                offset=offset,
                length=length,
                valid=valid,
                code_point=f"U+{code_point:04X}" if valid else None,
            ).to_dict()
        )
    invalid_count = sum(1 for entry in entries if not entry["valid"])
    return ToolResult(
        success=True,
        output=entries,
        details={"byte_count": len(data), "invalid_count": invalid_count},
    )
