# vim: set et ai ts=4 sts=4 sw=4:
from .errors import (
    InvalidBmpString,
    InvalidIa5String,
    InvalidNumericString,
    InvalidPrintableString,
    InvalidUtf8String,
    UnsupportedStringType,
)

TAG_UTF8_STRING = 0x0C
TAG_NUMERIC_STRING = 0x12
TAG_PRINTABLE_STRING = 0x13
TAG_T61_STRING = 0x14
TAG_IA5_STRING = 0x16
TAG_BMP_STRING = 0x1E

# X.680 PrintableString, plus '*' (wildcard names) and '&', both of which
# show up in deployed CA certificates
PRINTABLE = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz"
    b"0123456789"
    b"'()+,-./:=? "
    b"*&"
)

NUMERIC = frozenset(b"0123456789 ")


def _t61(value):
    return value.decode("utf-8", errors="replace")


def _printable(value):
    if not all(b in PRINTABLE for b in value):
        raise InvalidPrintableString()
    return value.decode("ascii")


def _utf8(value):
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUtf8String() from exc


def _bmp(value):
    if len(value) % 2 != 0:
        raise InvalidBmpString()
    if value[-2:] == b"\x00\x00":
        value = value[:-2]
    return value.decode("utf-16-be", errors="replace")


def _ia5(value):
    if any(b > 0x7F for b in value):
        raise InvalidIa5String()
    return value.decode("ascii")


def _numeric(value):
    if not all(b in NUMERIC for b in value):
        raise InvalidNumericString()
    return value.decode("ascii")


_decoders = {
    TAG_T61_STRING: _t61,
    TAG_PRINTABLE_STRING: _printable,
    TAG_UTF8_STRING: _utf8,
    TAG_BMP_STRING: _bmp,
    TAG_IA5_STRING: _ia5,
    TAG_NUMERIC_STRING: _numeric,
}


def decode_string(tag: int, value: bytes) -> str:
    """Decode the contents of a DER string element to text.

    Args:
        tag: DER identifier octet of the element
        value: element contents

    Raises:
        InvalidStringEncoding: contents break the rules of the string type
        UnsupportedStringType: tag is not one of the known string types
    """
    try:
        decoder = _decoders[tag]
    except KeyError:
        raise UnsupportedStringType(tag) from None
    return decoder(bytes(value))
