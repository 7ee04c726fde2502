import dns.rdataclass
import dns.rdatatype

from idna_mcp_server.codec import DEFAULT_BUFFER_SIZE
from idna_mcp_server.resolver import Resolver
from idna_mcp_server.typedefs import ToolResult


async def idn_dns_lookup_impl(
    hostname: str,
    record_type: str = "A",
    nameservers: list[str] | None = None,
    timeout: float = 5.0,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> ToolResult:
    """Convert a Unicode hostname to ACE form and look up its records.

    Args:
        hostname (str): The hostname to resolve, in Unicode or ACE form.
        record_type (str): The DNS record type to query (e.g., A, AAAA, MX).
        nameservers (list[str] | None): Optional nameservers to query.
        timeout (float): Query timeout in seconds.
        buffer_size (int): Maximum size in bytes of the converted name.

    Returns:
        ToolResult: Result object containing the resolved records or error details.
    """
    supported_types = [dns.rdatatype.to_text(rdtype) for rdtype in dns.rdatatype.RdataType]
    if record_type.upper() not in supported_types:
        return ToolResult(
            success=False,
            error=f"Unsupported record type: {record_type}",
            details={"supported_record_types": supported_types},
        )

    resolver = Resolver(nameservers=nameservers, timeout=timeout, buffer_size=buffer_size)
    result = await resolver.async_resolve(hostname, record_type.upper())
    if not result.success:
        return ToolResult(
            success=False, error=result.error or "Unknown error", details=result.details
        )

    details = {
        "duration": result.duration,
        "query_name": str(result.qname) if result.qname else hostname,
        "query_type": dns.rdatatype.to_text(result.rdtype) if result.rdtype else record_type,
        "rcode_text": result.rcode_text,
    }
    records = []
    if result.response and result.qname and result.rdtype:
        rrset = result.response.get_rrset(
            section=result.response.answer,
            name=result.qname,
            rdclass=dns.rdataclass.IN,
            rdtype=result.rdtype,
        )
        if not rrset:
            return ToolResult(success=True, output=[], error="No records found", details=details)
        records = Resolver.get_records_from_rrset(rrset)

    return ToolResult(success=True, output=records, details=details)
