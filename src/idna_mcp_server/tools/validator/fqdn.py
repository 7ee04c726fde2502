import re
from typing import Tuple

from idna_mcp_server.codec import to_ascii
from idna_mcp_server.exceptions import BufferTooSmall, IDNAError, handle_idna_error

# - Letters, digits, hyphens
# - Cannot start or end with hyphen
# - Length 1–63
LABEL_REGEX = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")


async def validate_fqdn(domain: str) -> Tuple[bool, str]:
    """
    Validate a Fully Qualified Domain Name (FQDN) according to DNS RFC rules.
    Covers RFC 1035 and RFC 1123 on the ACE form produced by the IDNA codec.

    Returns:
        Tuple[bool, str]: (is_valid, message) where is_valid is True if the FQDN
        is valid and message describes the result or error.
    """

    if not isinstance(domain, str) or not domain:
        return False, "Domain must be a non-empty string"

    # Convert IDN to ASCII (punycode). If this fails → invalid.
    try:
        domain_ascii = to_ascii(domain)
    except BufferTooSmall as e:
        return False, f"FQDN exceeds maximum of 253 characters (more than {e.capacity} bytes)"
    except IDNAError as e:
        return False, f"Invalid IDN encoding: {handle_idna_error(e)}"

    # Remove a trailing dot if present (FQDN canonical form)
    if domain_ascii.endswith("."):
        domain_ascii = domain_ascii[:-1]

    # Entire FQDN length (in ASCII) must be <= 253 chars
    if len(domain_ascii) > 253:
        description = f"FQDN length {len(domain_ascii)} exceeds maximum of 253 characters"
        return False, description

    labels = domain_ascii.split(".")

    # No empty labels allowed (e.g. "example..com")
    if any(label == "" for label in labels):
        description = "FQDN contains empty labels (consecutive dots or leading dot)"
        return False, description

    for label in labels:
        if not LABEL_REGEX.match(label):
            description = (
                f"Label '{label}' is invalid (must be 1-63 chars, "
                "alphanumeric/hyphen, not start/end with hyphen)"
            )
            return False, description

    return True, f"Valid FQDN ({domain_ascii})"
