from idna_mcp_server.codec import DEFAULT_BUFFER_SIZE, to_ascii
from idna_mcp_server.exceptions import IDNAError, handle_idna_error
from idna_mcp_server.typedefs import ToolResult


async def punycode_converter_impl(
    domain: str, buffer_size: int = DEFAULT_BUFFER_SIZE
) -> ToolResult:
    """Perform Unicode IDN domain name conversion into punycode ASCII format.

    Args:
        domain (str): The domain name to convert to punycode.
        buffer_size (int): Maximum size in bytes of the converted name.

    Returns:
        ToolResult: Punycode domain name or error details.
    """
    try:
        punycode = to_ascii(domain.strip(), capacity=buffer_size)
    except IDNAError as e:
        return ToolResult(
            success=False,
            error=handle_idna_error(e),
            details={"domain": domain, "exception_type": type(e).__name__},
        )
    return ToolResult(
        success=True,
        output={"domain": domain, "punycode": punycode, "length": len(punycode)},
    )
