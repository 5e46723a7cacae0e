"""
Subject DN extraction for X.509 certificates, rendered per RFC 4514 with the
attribute names of the Open Banking Brasil security profile
(https://openbanking-brasil.github.io/specs-seguranca).
"""
import logging

from . import certutil, der, render
from .errors import (
    CertificateError,
    EncodingError,
    InvalidStringEncoding,
    MalformedEncoding,
    SubjectError,
    UnsupportedStringType,
)
from .oids import BASIC_OID_NAMES, OID_NAMES, REGISTRIES

LOG = logging.getLogger(__name__)


def extract_subject_der(raw_subject: bytes, names=None) -> str:
    """Render the DER encoded subject Name `raw_subject`.

    String values are decoded and validated here, independently of any
    certificate library.
    """
    return render.render_name(der.parse_name(raw_subject), names)


def extract_subject_parsed(name, names=None) -> str:
    """Render an asn1crypto Name, trusting asn1crypto's string decoding."""

    return render.render_pairs(certutil.subject_pairs(name), names)


def extract_subject(cert, names=None, parsed=False) -> str:
    """Returns the subject DN of `cert`.

    Args:
        cert: cryptography or asn1crypto Certificate, or PEM/DER bytes
        names: OID to short name mapping, defaults to OID_NAMES
        parsed: render from the library decoded Name instead of the
            raw subject bytes

    Raises:
        SubjectError
    """
    if parsed:
        LOG.debug("extracting subject from decoded name")
        return extract_subject_parsed(certutil.subject_name(cert), names)
    return extract_subject_der(certutil.raw_subject(cert), names)


def subject_from_file(filename, names=None, parsed=False) -> str:
    with open(filename, "rb") as fp:
        cert = certutil.load_certificate(fp.read())
    LOG.debug("loaded certificate %s", filename)
    return extract_subject(cert, names, parsed)


__all__ = [
    "BASIC_OID_NAMES",
    "CertificateError",
    "EncodingError",
    "InvalidStringEncoding",
    "MalformedEncoding",
    "OID_NAMES",
    "REGISTRIES",
    "SubjectError",
    "UnsupportedStringType",
    "extract_subject",
    "extract_subject_der",
    "extract_subject_parsed",
    "subject_from_file",
]
