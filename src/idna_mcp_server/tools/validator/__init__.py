from .fqdn import validate_fqdn

__ALL__ = [
    validate_fqdn,
]
