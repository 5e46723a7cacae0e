"""
Attribute short names used when rendering a subject DN, as required by the
Open Banking Brasil security profile
(https://openbanking-brasil.github.io/specs-seguranca).

Attribute types that are not listed here are rendered as dotted OID with a
hex encoded value (RFC 4514 section 2.4).
"""
from types import MappingProxyType

BASIC_OID_NAMES = MappingProxyType(
    {
        "2.5.4.3": "CN",
        "2.5.4.7": "L",
        "2.5.4.8": "ST",
        "2.5.4.10": "O",
        "2.5.4.11": "OU",
        "2.5.4.6": "C",
        "2.5.4.9": "STREET",
        "0.9.2342.19200300.100.1.25": "DC",
        "0.9.2342.19200300.100.1.1": "UID",
    }
)

EXTENDED_OID_NAMES = MappingProxyType(
    {
        "2.5.4.15": "businessCategory",
        "1.3.6.1.4.1.311.60.2.1.3": "jurisdictionCountryName",
        "2.5.4.5": "serialNumber",
    }
)

OID_NAMES = MappingProxyType({**BASIC_OID_NAMES, **EXTENDED_OID_NAMES})

REGISTRIES = MappingProxyType({"extended": OID_NAMES, "basic": BASIC_OID_NAMES})


def lookup(oid, names=None):
    """Maps dotted OID to its short name, or None if it has none."""

    return (OID_NAMES if names is None else names).get(oid)
