from .lookup import idn_dns_lookup_impl

__ALL__ = [
    idn_dns_lookup_impl,
]
