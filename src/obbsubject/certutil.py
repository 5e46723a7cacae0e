# vim: set et ai ts=4 sts=4 sw=4:
import collections
import logging

from asn1crypto import core, pem
from asn1crypto import x509 as X509
from cryptography import x509
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization

from .errors import CertificateError, MalformedEncoding

LOG = logging.getLogger(__name__)

BACKEND = default_backend()

ParsedAttribute = collections.namedtuple("ParsedAttribute", ["oid", "text", "encoded"])

CERTIFICATE_PEM_TYPES = ("CERTIFICATE", "X509 CERTIFICATE")

_string_specs = {
    0x0C: core.UTF8String,
    0x12: core.NumericString,
    0x13: core.PrintableString,
    0x14: core.TeletexString,
    0x16: core.IA5String,
    0x1E: core.BMPString,
}


def load_certificate(data: bytes) -> x509.Certificate:
    """Parse a PEM or DER certificate.

    Signatures are not verified.
    """
    if pem.detect(data):
        try:
            type_name, _, data = pem.unarmor(data)
        except ValueError as exc:
            raise CertificateError("error decoding PEM: {}".format(exc)) from exc
        LOG.debug("unarmored PEM block %s", type_name)
        if type_name not in CERTIFICATE_PEM_TYPES:
            raise CertificateError("not a certificate: {}".format(type_name))
    try:
        return x509.load_der_x509_certificate(data, backend=BACKEND)
    except ValueError as exc:
        raise CertificateError("error parsing certificate: {}".format(exc)) from exc


def _asn1_certificate(cert):
    if isinstance(cert, X509.Certificate):
        return cert
    if isinstance(cert, x509.Certificate):
        return X509.Certificate.load(cert.public_bytes(serialization.Encoding.DER))
    data = bytes(cert)
    if pem.detect(data):
        data = pem.unarmor(data)[2]
    return X509.Certificate.load(data)


def subject_name(cert) -> X509.Name:
    """Returns the asn1crypto subject Name of a cryptography Certificate,
    an asn1crypto Certificate, or PEM/DER certificate bytes."""

    if not isinstance(cert, (X509.Certificate, x509.Certificate, bytes, bytearray)):
        raise CertificateError(
            "unsupported certificate type: {}".format(type(cert).__name__)
        )
    try:
        return _asn1_certificate(cert)["tbs_certificate"]["subject"]
    except ValueError as exc:
        raise CertificateError("error parsing certificate: {}".format(exc)) from exc


def raw_subject(cert) -> bytes:
    """Byte-exact DER encoding of the certificate subject."""

    name = subject_name(cert)
    try:
        return name.dump()
    except ValueError as exc:
        raise MalformedEncoding("x509: invalid RDNSequence: {}".format(exc)) from exc


def _any_text(value):
    # attribute types asn1crypto has no spec for; decode universal string tags
    encoded = value.dump()
    spec = _string_specs.get(encoded[0])
    if spec is None:
        return None
    try:
        return spec.load(encoded).native
    except ValueError:
        # not text; rendered from `encoded` instead
        return None


def subject_pairs(name: X509.Name):
    """Flatten an asn1crypto Name into lists of ParsedAttribute.

    `text` is the value as decoded by asn1crypto, or None where the value
    is not a string; `encoded` is always the DER element of the value.
    """
    rdns = []
    try:
        for rdn in name.chosen:
            attrs = []
            for atv in rdn:
                value = atv["value"]
                if isinstance(value, core.Any):
                    text = _any_text(value)
                else:
                    text = value.native
                if not isinstance(text, str):
                    text = None
                attrs.append(ParsedAttribute(atv["type"].dotted, text, value.dump()))
            rdns.append(attrs)
    except ValueError as exc:
        raise MalformedEncoding("x509: invalid RDNSequence: {}".format(exc)) from exc

    LOG.debug("subject has %d RDNs", len(rdns))
    return rdns
