"""Unit tests for barcode generation and the check digit."""

import re

import pytest

from labelkit.domain.exceptions import ValidationError
from labelkit.domain.model.identity import BarcodeIdentity
from labelkit.domain.service.code_generator import (
    checksum_digit,
    generate_code,
    is_valid_code,
    rolling_hash,
)


def _identities() -> list[BarcodeIdentity]:
    ids = [BarcodeIdentity(f"prod-{n}", f"vendor-{n % 7}") for n in range(200)]
    ids += [
        BarcodeIdentity("abc123", "v1"),
        BarcodeIdentity("abc123", "v2"),
        BarcodeIdentity("abc124", "v1"),
        BarcodeIdentity("", ""),
        BarcodeIdentity("منتج", "بائع"),
        BarcodeIdentity("🍞", "v1"),
    ]
    return ids


class TestRollingHash:

    def test_empty_string_is_zero(self):
        assert rolling_hash("") == 0

    def test_single_character_is_its_code(self):
        assert rolling_hash("-") == 45

    def test_polynomial_on_short_input(self):
        assert rolling_hash("a-b") == (97 * 31 + 45) * 31 + 98

    def test_wraps_to_signed_32_bit(self):
        h = rolling_hash("abc123-v1")
        assert h == -1113580840
        assert -(2**31) <= h < 2**31

    def test_long_input_stays_in_range(self):
        h = rolling_hash("x" * 10_000)
        assert -(2**31) <= h < 2**31

    def test_astral_character_hashes_as_surrogate_pair(self):
        # U+1F35E is D83C DF5E in UTF-16
        assert rolling_hash("🍞") == 0xD83C * 31 + 0xDF5E


class TestChecksumDigit:

    def test_known_payload(self):
        # even positions: 0+1+1+5+0+4 = 11, odd: (0+1+3+8+8+0)*3 = 60
        assert checksum_digit("001113580840") == 9

    def test_all_zeros(self):
        assert checksum_digit("000000000000") == 0

    def test_sum_already_multiple_of_ten(self):
        # 1 + 3*3 = 10 -> check digit 0, not 10
        assert checksum_digit("130000000000") == 0

    def test_matches_retail_code(self):
        # 4006381333931 is a real EAN-13
        assert checksum_digit("400638133393") == 1

    @pytest.mark.parametrize("payload", ["", "12345", "1234567890123", "12345678901a"])
    def test_rejects_malformed_payload(self, payload):
        with pytest.raises(ValidationError, match="12 digits"):
            checksum_digit(payload)


class TestGenerateCode:

    def test_documented_example(self):
        code = generate_code(BarcodeIdentity(product_id="abc123", vendor_id="v1"))
        assert str(code) == "0011135808409"

    def test_same_identity_twice_gives_same_code(self):
        identity = BarcodeIdentity("abc123", "v1")
        assert generate_code(identity) == generate_code(identity)
        assert str(generate_code(identity)) == str(
            generate_code(BarcodeIdentity("abc123", "v1"))
        )

    def test_empty_identity_still_produces_code(self):
        # key is just the separator "-"
        assert str(generate_code(BarcodeIdentity("", ""))) == "0000000000451"

    def test_format_is_always_13_digits(self):
        for identity in _identities():
            assert re.fullmatch(r"\d{13}", str(generate_code(identity)))

    def test_check_digit_always_valid(self):
        for identity in _identities():
            value = str(generate_code(identity))
            assert checksum_digit(value[:12]) == int(value[12])

    def test_no_collisions_in_sample(self):
        identities = _identities()
        codes = {str(generate_code(i)) for i in identities}
        assert len(codes) == len(identities)

    def test_vendor_changes_code(self):
        a = generate_code(BarcodeIdentity("abc123", "v1"))
        b = generate_code(BarcodeIdentity("abc123", "v2"))
        assert a != b

    def test_product_changes_code(self):
        a = generate_code(BarcodeIdentity("abc123", "v1"))
        b = generate_code(BarcodeIdentity("abc124", "v1"))
        assert a != b


class TestIsValidCode:

    def test_generated_code_is_valid(self):
        assert is_valid_code("0011135808409")

    def test_wrong_check_digit(self):
        assert not is_valid_code("0011135808408")

    @pytest.mark.parametrize("text", ["", "001113580840", "00111358084090", "00111358O8409"])
    def test_wrong_shape(self, text):
        assert not is_valid_code(text)
