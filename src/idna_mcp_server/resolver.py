"""Hostname resolution for internationalized domain names.

This module provides a Resolver class that converts a hostname to its ACE form
with the IDNA codec before handing it to dnspython, the way a name resolution
layer converts user supplied hostnames before any lookup is made.
"""

import asyncio
import time
from typing import Any

import dns.asyncquery
import dns.exception
import dns.flags
import dns.message
import dns.name
import dns.rcode
import dns.rdatatype
import dns.resolver
import dns.rrset
from fastmcp.utilities.logging import get_logger

from idna_mcp_server.codec import DEFAULT_BUFFER_SIZE, to_ascii
from idna_mcp_server.exceptions import IDNAError, handle_idna_error
from idna_mcp_server.typedefs import QueryResult

logger = get_logger(__name__)

# Type aliases
RRset = dns.rrset.RRset

DEFAULT_TIMEOUT = 5.0


class Resolver:
    """DNS resolver that accepts Unicode hostnames.

    Attributes:
        default_timeout (float): Default timeout for DNS queries in seconds.
        buffer_size (int): Scratch buffer capacity used for ACE conversion.
        resolver (dns.resolver.Resolver): Underlying dnspython resolver instance.
    """

    def __init__(
        self,
        nameservers: list[str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ):
        """Initialize the resolver with optional nameservers and timeout.

        Args:
            nameservers: Optional list of nameserver IP addresses to use. When
                omitted the system resolver configuration is read.
            timeout: Query timeout in seconds (default: 5.0).
            buffer_size: Capacity of the ACE conversion buffer (default: 256).
        """
        self.default_timeout = timeout
        self.buffer_size = buffer_size
        self.resolver = dns.resolver.Resolver(configure=not nameservers)
        self.resolver.lifetime = timeout
        if nameservers:
            self.resolver.nameservers = [ns.strip() for ns in nameservers if ns.strip()]

    def to_ace(self, hostname: str) -> str:
        """Convert a hostname to its ASCII-compatible form.

        Raises:
            InvalidEncoding: If the hostname holds malformed UTF-8.
            BufferTooSmall: If the ACE form exceeds ``buffer_size`` bytes.
        """
        return to_ascii(hostname.strip(), capacity=self.buffer_size)

    async def async_resolve(
        self,
        domain: str,
        rdtype: str = "A",
        nameserver: str | None = None,
        use_tcp: bool = False,
        timeout: float | None = None,
    ) -> QueryResult:
        """Asynchronously resolve a single RRset for a possibly Unicode hostname.

        Args:
            domain: The hostname to query, in Unicode or ACE form.
            rdtype: DNS record type to query for.
            nameserver: Optional specific nameserver to query.
            use_tcp: Whether to use TCP for the query (default: False).
            timeout: Optional query timeout override.

        Returns:
            QueryResult: Result of the DNS query operation.
        """
        if timeout is None:
            timeout = self.default_timeout
        try:
            ace_name = self.to_ace(domain)
        except IDNAError as e:
            logger.warning("Cannot convert %r to ACE form: %s", domain, e)
            return QueryResult(
                success=False,
                error=handle_idna_error(e),
                details={"exception_type": type(e).__name__},
            )

        try:
            qname = dns.name.from_text(ace_name)
            rdtype_obj = dns.rdatatype.from_text(rdtype)
            query = dns.message.make_query(qname, rdtype_obj)

            if nameserver is None:
                if not self.resolver.nameservers:
                    return QueryResult(
                        success=False,
                        error="No nameservers configured in resolver",
                        details={"ace_name": ace_name},
                    )
                nameserver = str(self.resolver.nameservers[0])

            logger.debug("Querying %s %s at %s", ace_name, rdtype, nameserver)
            start_time = time.time()
            if use_tcp:
                response = await dns.asyncquery.tcp(query, nameserver, timeout=timeout)
            else:
                response = await dns.asyncquery.udp(query, nameserver, timeout=timeout)
                if response.flags & dns.flags.TC:  # Truncated, retry with TCP
                    response = await dns.asyncquery.tcp(query, nameserver, timeout=timeout)

            return QueryResult(
                success=True,
                duration=time.time() - start_time,
                qname=qname,
                rdtype=rdtype_obj,
                response=response,
                rcode=response.rcode(),
                rcode_text=dns.rcode.to_text(response.rcode()),
                details={
                    "ace_name": ace_name,
                    "answer_count": len(response.answer),
                    "is_truncated": bool(response.flags & dns.flags.TC),
                },
            )

        except dns.exception.DNSException as e:
            logger.warning("DNS query for %s failed: %s", ace_name, e)
            return QueryResult(
                success=False,
                error=handle_idna_error(e),
                details={"ace_name": ace_name, "exception_type": type(e).__name__},
            )
        except (OSError, asyncio.TimeoutError) as e:
            logger.warning("DNS query for %s failed: %s", ace_name, e)
            return QueryResult(
                success=False,
                error=str(e),
                details={"ace_name": ace_name, "exception_type": type(e).__name__},
            )

    @staticmethod
    def get_records_from_rrset(rrset: RRset) -> list[dict[str, Any]]:
        """Extracts the records from a given RRset.

        Args:
            rrset: The RRset from which we extract the records.

        Returns:
            A list of dicts or empty list when no records are found.
        """
        rdtype = dns.rdatatype.to_text(rrset.rdtype)
        records = []
        for rdata in rrset:
            if rdtype in ["A", "AAAA"]:
                records.append({"address": str(rdata), "ttl": rrset.ttl})
            elif rdtype in ["CNAME", "NS", "PTR"]:
                records.append({"target": str(rdata), "ttl": rrset.ttl})
            elif rdtype == "MX":
                records.append(
                    {
                        "preference": rdata.preference,
                        "exchange": str(rdata.exchange),
                        "ttl": rrset.ttl,
                    }
                )
            else:
                records.append({"data": str(rdata), "ttl": rrset.ttl})
        return records
