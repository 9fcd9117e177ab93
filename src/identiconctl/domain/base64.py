"""Standard RFC 4648 base64 encoding (``=`` padded, no wrapping).

Bytes are consumed one at a time while tracking how many bits are carried
over from the previous byte (0, 2 or 4).  Each step emits one or two
6-bit symbols and carries the remainder forward.
"""

from __future__ import annotations

from enum import Enum

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PADDING = "="


class Carry(Enum):
    """Number of leftover bits held between input bytes."""

    ZERO = 0
    TWO = 2
    FOUR = 4


def encoded_length(num_bytes: int) -> int:
    """Length of the padded encoding of *num_bytes* bytes."""
    return -(-num_bytes // 3) * 4


def encode(data: bytes) -> str:
    """Encode *data* as padded standard base64."""
    out: list[str] = []
    remainder = 0
    state = Carry.ZERO

    for b in data:
        if state is Carry.ZERO:
            out.append(ALPHABET[(b & 0b11111100) >> 2])
            remainder, state = (b & 0b00000011) << 4, Carry.TWO
        elif state is Carry.TWO:
            out.append(ALPHABET[remainder | ((b & 0b11110000) >> 4)])
            remainder, state = (b & 0b00001111) << 2, Carry.FOUR
        else:
            out.append(ALPHABET[remainder | ((b & 0b11000000) >> 6)])
            out.append(ALPHABET[b & 0b00111111])
            remainder, state = 0, Carry.ZERO

    if state is Carry.TWO:
        out.append(ALPHABET[remainder])
        out.append(PADDING * 2)
    elif state is Carry.FOUR:
        out.append(ALPHABET[remainder])
        out.append(PADDING)

    return "".join(out)
