"""Code Generator: identity tuple -> checksum-validated 13-digit code.

Pure functions, no I/O. The payload comes from a 31-multiplier rolling
hash with 32-bit signed overflow. The hash is NOT cryptographic and
distinct identities can collide; collisions are neither detected nor
resolved. The check digit uses the retail 1/3 alternating weights so
scanners and label tooling accept the code.

The overflow semantics must stay bit-exact: codes already printed on
shelves are regenerated, not stored, by callers that rely on
``generate_code(i) == generate_code(i)``.
"""

from __future__ import annotations

from labelkit.domain.exceptions import ValidationError
from labelkit.domain.model.identity import BarcodeIdentity
from labelkit.domain.model.value_objects import (
    CODE_LENGTH,
    PAYLOAD_LENGTH,
    BarcodeCode,
)

HASH_MULTIPLIER = 31
_UINT32 = 1 << 32
_INT32_MAX = (1 << 31) - 1


def generate_code(identity: BarcodeIdentity) -> BarcodeCode:
    """Derive the barcode for a (product, vendor) pair.

    Example:
        >>> str(generate_code(BarcodeIdentity("abc123", "v1")))
        '0011135808409'
    """
    payload = _payload(rolling_hash(identity.key))
    return BarcodeCode(payload + str(checksum_digit(payload)))


def rolling_hash(text: str) -> int:
    """32-bit signed polynomial hash, ``h = h * 31 + unit`` per UTF-16 unit."""
    h = 0
    for unit in _utf16_units(text):
        h = (h * HASH_MULTIPLIER + unit) % _UINT32
    if h > _INT32_MAX:
        h -= _UINT32
    return h


def checksum_digit(payload: str) -> int:
    """Weighted mod-10 check digit over 12 payload digits.

    Weights are 1 at even positions and 3 at odd positions, counted
    from the left starting at 0.
    """
    if len(payload) != PAYLOAD_LENGTH or not all("0" <= ch <= "9" for ch in payload):
        raise ValidationError(
            f"Checksum payload must be {PAYLOAD_LENGTH} digits, got {payload!r}"
        )
    total = sum(
        int(digit) * (1 if i % 2 == 0 else 3) for i, digit in enumerate(payload)
    )
    return (10 - total % 10) % 10


def is_valid_code(text: str) -> bool:
    """True if *text* is 13 ASCII digits whose last digit checks out."""
    if len(text) != CODE_LENGTH or not all("0" <= ch <= "9" for ch in text):
        return False
    return checksum_digit(text[:PAYLOAD_LENGTH]) == int(text[-1])


# --- Internal helpers ---------------------------------------------------------


def _payload(h: int) -> str:
    # abs(-2**31) is 10 digits, so padding to 12 never truncates real digits
    return str(abs(h)).rjust(PAYLOAD_LENGTH, "0")[:PAYLOAD_LENGTH]


def _utf16_units(text: str):
    # Characters outside the BMP hash as their two surrogate halves.
    encoded = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(encoded), 2):
        yield encoded[i] | (encoded[i + 1] << 8)
