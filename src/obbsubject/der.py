# vim: set et ai ts=4 sts=4 sw=4:
"""
Minimal DER reader for X.509 Name structures.

Only what is needed to walk an RDNSequence is supported: single octet
tags, definite DER lengths and OBJECT IDENTIFIER contents. See X.690
sections 8.1.2 and 8.1.3.
"""
import collections
import logging

from asn1crypto import core

from .errors import MalformedEncoding

LOG = logging.getLogger(__name__)

TAG_OID = 0x06
TAG_SEQUENCE = 0x30
TAG_SET = 0x31

AttributeTypeAndValue = collections.namedtuple(
    "AttributeTypeAndValue", ["oid", "tag", "value"]
)


class DERReader:
    """Cursor over a DER buffer.

    Every read consumes one complete TLV element from the front of the
    buffer; nested containers are read through a new DERReader over the
    element contents.
    """

    def __init__(self, data):
        self.data = bytes(data)
        self.pos = 0

    def empty(self):
        return self.pos >= len(self.data)

    def _header(self):
        """Parse the header at the cursor without consuming it.

        Returns:
            (tag, header_length, content_length)
        """
        data, pos = self.data, self.pos
        if len(data) - pos < 2:
            raise MalformedEncoding("truncated element header")

        tag = data[pos]
        if tag & 0x1F == 0x1F:
            raise MalformedEncoding("high tag number form is not supported")

        length = data[pos + 1]
        header = 2
        if length & 0x80:
            count = length & 0x7F
            if count == 0:
                raise MalformedEncoding("indefinite length is not DER")
            if count > 4:
                raise MalformedEncoding("length too large")
            if len(data) - pos - 2 < count:
                raise MalformedEncoding("truncated length")
            octets = data[pos + 2 : pos + 2 + count]
            if octets[0] == 0:
                raise MalformedEncoding("non-minimal length encoding")
            length = int.from_bytes(octets, "big")
            if length < 0x80:
                raise MalformedEncoding("non-minimal length encoding")
            header += count

        if length > len(data) - pos - header:
            raise MalformedEncoding(
                "element length {} exceeds remaining {} bytes".format(
                    length, len(data) - pos - header
                )
            )
        return tag, header, length

    def peek_tag(self):
        if self.empty():
            raise MalformedEncoding("unexpected end of data")
        return self._header()[0]

    def read_any(self):
        """Consume the next element, whatever its tag.

        Returns:
            (tag, contents)
        """
        tag, contents, _ = self._read()
        return tag, contents

    def read(self, expected):
        """Consume the next element, which must carry tag `expected`, and
        return a reader over its contents."""
        tag, contents, _ = self._read()
        if tag != expected:
            raise MalformedEncoding(
                "expected tag 0x{:02x}, found 0x{:02x}".format(expected, tag)
            )
        return DERReader(contents)

    def read_oid(self):
        """Consume an OBJECT IDENTIFIER and return it in dotted form."""
        tag, contents, encoded = self._read()
        if tag != TAG_OID:
            raise MalformedEncoding(
                "expected OBJECT IDENTIFIER, found tag 0x{:02x}".format(tag)
            )
        if not contents or contents[-1] & 0x80:
            raise MalformedEncoding("invalid OBJECT IDENTIFIER")
        start = True
        for b in contents:
            # sub-identifiers are minimally encoded
            if start and b == 0x80:
                raise MalformedEncoding("invalid OBJECT IDENTIFIER")
            start = not b & 0x80
        return core.ObjectIdentifier.load(encoded).dotted

    def _read(self):
        if self.empty():
            raise MalformedEncoding("unexpected end of data")
        tag, header, length = self._header()
        start = self.pos
        end = start + header + length
        self.pos = end
        return tag, self.data[start + header : end], self.data[start:end]


def parse_name(raw):
    """Decode a DER Name (RDNSequence) into a list of RDNs.

    Args:
        raw (bytes): DER encoding of the Name

    Returns:
        list of lists of AttributeTypeAndValue, in encoding order
    """
    rdn_seq = DERReader(raw).read(TAG_SEQUENCE)

    rdns = []
    while not rdn_seq.empty():
        rdn_set = rdn_seq.read(TAG_SET)
        rdn = []
        while not rdn_set.empty():
            atav = rdn_set.read(TAG_SEQUENCE)
            oid = atav.read_oid()
            tag, value = atav.read_any()
            rdn.append(AttributeTypeAndValue(oid, tag, value))
        rdns.append(rdn)

    LOG.debug("parsed name: %d RDNs", len(rdns))
    return rdns
