# vim: set et ai ts=4 sts=4 sw=4:
"""
RFC 4514 string representation of a decoded Name.

RDNs are written last-encoded first, separated by ','; attributes of a
multi-valued RDN keep their encoding order and are separated by '+'.
"""
import binascii

from asn1crypto import parser

from . import oids
from .errors import EncodingError, UnsupportedStringType
from .strings import decode_string

ESCAPED = frozenset(',+"\\<>;')


def escape_value(value: str) -> str:
    """Escape an attribute value per RFC 4514 section 2.4."""

    last = len(value) - 1
    out = []
    for i, c in enumerate(value):
        if (
            c in ESCAPED
            or (c == " " and (i == 0 or i == last))
            or (c == "#" and i == 0)
        ):
            out.append("\\")
        out.append(c)
    return "".join(out)


def hex_value(tag: int, value: bytes) -> str:
    """DER encode the element (tag, value) and return it as '#' + hex."""

    try:
        encoded = parser.emit(tag >> 6, (tag >> 5) & 1, tag & 0x1F, bytes(value))
    except (TypeError, ValueError) as exc:
        raise EncodingError("error building name: {}".format(exc)) from exc
    return "#" + binascii.hexlify(encoded).decode("ascii")


def render_attribute(atv, names=None):
    name = oids.lookup(atv.oid, names)
    if name is None:
        return atv.oid + "=" + hex_value(atv.tag, atv.value)
    return name + "=" + escape_value(decode_string(atv.tag, atv.value))


def _join(rendered):
    return ",".join(reversed([rdn for rdn in rendered if rdn]))


def render_name(rdns, names=None):
    """Render RDNs decoded by der.parse_name.

    Args:
        rdns: list of lists of AttributeTypeAndValue, in encoding order
        names: OID to short name mapping, defaults to oids.OID_NAMES

    Returns:
        str, empty for an empty Name
    """
    return _join("+".join(render_attribute(atv, names) for atv in rdn) for rdn in rdns)


def render_pair(attr, names=None):
    name = oids.lookup(attr.oid, names)
    if name is None:
        return attr.oid + "=#" + binascii.hexlify(attr.encoded).decode("ascii")
    if attr.text is None:
        raise UnsupportedStringType(attr.encoded[0])
    return name + "=" + escape_value(attr.text)


def render_pairs(rdns, names=None):
    """Render RDNs whose values were already decoded by a certificate
    library.

    Args:
        rdns: list of lists of certutil.ParsedAttribute, in encoding order
        names: OID to short name mapping, defaults to oids.OID_NAMES
    """
    return _join("+".join(render_pair(attr, names) for attr in rdn) for rdn in rdns)
