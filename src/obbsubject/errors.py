class SubjectError(ValueError):
    """Base class for everything raised while extracting a subject DN."""


class MalformedEncoding(SubjectError):
    pass


class InvalidStringEncoding(SubjectError):
    subtype = "string"

    def __init__(self, msg=None):
        super().__init__(msg or "invalid " + self.subtype)


class InvalidPrintableString(InvalidStringEncoding):
    subtype = "PrintableString"


class InvalidUtf8String(InvalidStringEncoding):
    subtype = "UTF-8 string"


class InvalidBmpString(InvalidStringEncoding):
    subtype = "BMPString"


class InvalidIa5String(InvalidStringEncoding):
    subtype = "IA5String"


class InvalidNumericString(InvalidStringEncoding):
    subtype = "NumericString"


class UnsupportedStringType(SubjectError):
    def __init__(self, tag):
        self.tag = tag
        super().__init__("unsupported string type: 0x{:02x}".format(tag))


class EncodingError(SubjectError):
    pass


class CertificateError(SubjectError):
    pass
