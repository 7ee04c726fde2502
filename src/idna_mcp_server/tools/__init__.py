"""Tools related submodule to keep all things tool related in one place."""

from .converter import punycode_converter_impl
from .dns import idn_dns_lookup_impl
from .inspector import utf8_inspect_impl
from .validator import validate_fqdn

__ALL__ = [
    punycode_converter_impl,
    utf8_inspect_impl,
    validate_fqdn,
    idn_dns_lookup_impl,
]
