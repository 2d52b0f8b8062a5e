"""Code derivation: input string -> 64-bit identicon code."""

from __future__ import annotations

import hashlib

# SHA-512 digest is 64 bytes; the code is its final 8 bytes.
_CODE_BYTES = 8


def derive_code(text: str | bytes) -> int:
    """Derive the 64-bit code used to seed an identicon.

    The code is the big-endian interpretation of the last 8 bytes of the
    SHA-512 digest of the UTF-8 encoded input. Stable across runs and
    platforms; the empty string is valid input.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    digest = hashlib.sha512(data).digest()
    return int.from_bytes(digest[-_CODE_BYTES:], "big")
