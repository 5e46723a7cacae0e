import pytest

from obbsubject.der import DERReader, TAG_SEQUENCE, TAG_SET, parse_name
from obbsubject.errors import MalformedEncoding

from der_helpers import atv, name, rdn


class TestReader():

    def test_read_nested(self):
        reader = DERReader(b"\x30\x05\x31\x03\x04\x01\x41\x05\x00")
        seq = reader.read(TAG_SEQUENCE)
        assert reader.peek_tag() == 0x05
        assert reader.read_any() == (0x05, b"")
        assert reader.empty()

        inner = seq.read(TAG_SET)
        assert seq.empty()
        assert inner.read_any() == (0x04, b"A")
        assert inner.empty()

    def test_long_form_length(self):
        reader = DERReader(b"\x04\x81\x80" + b"x" * 0x80)
        tag, value = reader.read_any()
        assert tag == 0x04
        assert len(value) == 0x80
        assert reader.empty()

    def test_read_oid(self):
        assert DERReader(b"\x06\x03\x55\x04\x03").read_oid() == "2.5.4.3"
        assert (
            DERReader(b"\x06\x0a\x09\x92\x26\x89\x93\xf2\x2c\x64\x01\x19").read_oid()
            == "0.9.2342.19200300.100.1.25"
        )

    @pytest.mark.parametrize(
        "data",
        [
            b"",
            b"\x30",
            b"\x30\x05\x00",
            b"\x30\x80\x00\x00",
            b"\x30\x81\x05\x00\x00\x00\x00\x00",
            b"\x30\x82\x00\x81" + b"\x00" * 0x81,
            b"\x30\x85\x00\x00\x00\x00\x01\x00",
            b"\x30\x82\x01",
            b"\x1f\x01\x00",
        ],
        ids=[
            "empty",
            "no length",
            "short",
            "indefinite",
            "non minimal long form",
            "leading zero length",
            "length too large",
            "truncated length",
            "high tag number",
        ],
    )
    def test_malformed(self, data):
        with pytest.raises(MalformedEncoding):
            DERReader(data).read_any()

    def test_wrong_tag(self):
        with pytest.raises(MalformedEncoding):
            DERReader(b"\x31\x00").read(TAG_SEQUENCE)

    @pytest.mark.parametrize(
        "data", [b"\x06\x00", b"\x06\x02\x55\x84", b"\x06\x03\x55\x80\x03", b"\x04\x01\x00"]
    )
    def test_malformed_oid(self, data):
        with pytest.raises(MalformedEncoding):
            DERReader(data).read_oid()


class TestParseName():

    def test_parse(self):
        raw = name(
            rdn(atv("2.5.4.6", 0x13, b"BR")),
            rdn(atv("2.5.4.3", 0x0C, b"a"), atv("1.2.3.4", 0x16, b"b")),
        )
        rdns = parse_name(raw)
        assert len(rdns) == 2
        assert rdns[0][0] == ("2.5.4.6", 0x13, b"BR")
        assert [a.oid for a in rdns[1]] == ["2.5.4.3", "1.2.3.4"]
        assert rdns[1][1].tag == 0x16
        assert rdns[1][1].value == b"b"

    def test_empty(self):
        assert parse_name(b"\x30\x00") == []

    def test_not_a_sequence(self):
        with pytest.raises(MalformedEncoding):
            parse_name(b"\x31\x00")

    def test_rdn_not_a_set(self):
        with pytest.raises(MalformedEncoding):
            parse_name(b"\x30\x02\x30\x00")

    def test_attribute_not_a_sequence(self):
        with pytest.raises(MalformedEncoding):
            parse_name(b"\x30\x04\x31\x02\x31\x00")

    def test_missing_value(self):
        with pytest.raises(MalformedEncoding):
            parse_name(b"\x30\x09\x31\x07\x30\x05\x06\x03\x55\x04\x03")

    def test_truncated_value(self):
        raw = bytearray(name(rdn(atv("2.5.4.3", 0x0C, b"abc"))))
        raw[-4] = 0x05
        with pytest.raises(MalformedEncoding):
            parse_name(bytes(raw))
