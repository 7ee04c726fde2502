"""
Tool Mixin classes for IDNAMCPServer to separate concerns.
"""

from typing import Any

from fastmcp import Context

from idna_mcp_server.codec import DEFAULT_BUFFER_SIZE
from idna_mcp_server.resolver import DEFAULT_TIMEOUT
from idna_mcp_server.tools import (
    idn_dns_lookup_impl,
    punycode_converter_impl,
    utf8_inspect_impl,
    validate_fqdn,
)
from idna_mcp_server.typedefs import ToolResult


class ToolRegistrationMixin:
    """Mixin for registering IDNA tools with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when register_tools() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    @property
    def buffer_size(self) -> int:
        """Capacity of the ACE conversion buffer from the `codec` config section."""
        return int(self.config.get("codec", {}).get("buffer_size", DEFAULT_BUFFER_SIZE))

    def feature_enabled(self, name: str, default: bool = False) -> bool:
        return bool(self.config.get("features", {}).get(name, default))

    def register_tools(self) -> None:
        """Register all IDNA related tools with the MCP server."""
        dns_config = self.config.get("dns", {})
        buffer_size = self.buffer_size

        @self.server.tool(
            name="punycode_converter",
            description=(
                "Use this tool to convert an internationalized (Unicode) domain name "
                "into its ASCII-compatible punycode form, e.g. `bücher.com` to "
                "`xn--bcher-kva.com`."
            ),
            tags=set(("idna", "punycode", "converter", "idn")),
        )
        async def punycode_converter(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Converting `{domain}` to punycode.")
            return await punycode_converter_impl(domain, buffer_size=buffer_size)

        @self.server.tool(
            name="utf8_inspect",
            description=(
                "Use this tool to decode a hex encoded byte string as UTF-8 one code "
                "point at a time and find malformed sequences (overlong forms, "
                "surrogates, out of range values, illegal bytes)."
            ),
            tags=set(("utf8", "encoding", "diagnostics")),
        )
        async def utf8_inspect(hex_bytes: str, ctx: Context) -> ToolResult:
            await ctx.info("Inspecting UTF-8 byte sequence.")
            return await utf8_inspect_impl(hex_bytes)

        if self.feature_enabled("fqdn_validation", True):
            self._register_fqdn_tool()
        if self.feature_enabled("dns_lookup"):
            self._register_lookup_tool(dns_config, buffer_size)

    def _register_fqdn_tool(self) -> None:
        @self.server.tool(
            name="validate_fqdn",
            description=(
                "Use this tool to check whether a domain name, Unicode or ASCII, is a "
                "syntactically valid FQDN once converted to punycode."
            ),
            tags=set(("dns", "fqdn", "validation", "idn")),
        )
        async def validate_fqdn_tool(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Validating FQDN `{domain}`.")
            is_valid, message = await validate_fqdn(domain.strip())
            return ToolResult(success=True, output={"valid": is_valid, "message": message})

    def _register_lookup_tool(self, dns_config: dict[str, Any], buffer_size: int) -> None:
        @self.server.tool(
            name="idn_dns_lookup",
            description=(
                "Use this tool to resolve an internationalized hostname. The name is "
                "converted to punycode before the DNS query is sent."
            ),
            tags=set(("dns", "idn", "query", "lookup")),
        )
        async def idn_dns_lookup(hostname: str, record_type: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Querying for {record_type} record of `{hostname}`.")
            return await idn_dns_lookup_impl(
                hostname.strip(),
                record_type.strip().upper(),
                nameservers=dns_config.get("nameservers") or None,
                timeout=float(dns_config.get("timeout", DEFAULT_TIMEOUT)),
                buffer_size=buffer_size,
            )
