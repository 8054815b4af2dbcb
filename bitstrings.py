import math
from typing import Dict, Tuple


def byte_to_bits(b: int) -> str: # b: 0..255, most significant bit first
    return ''.join('1' if (b >> i) & 1 else '0' for i in range(7, -1, -1))


def text_to_bits(text: str, encoding: str) -> str:
    """
    Binary string of ``text`` as stored under ``encoding``
    Characters the codec cannot represent are written as '?'
    """
    if not text:
        return ""
    return ''.join(byte_to_bits(b) for b in text.encode(encoding, errors="replace"))


def pack_bits(bits: str) -> Tuple[bytes, int]:
    """
    Packs a '0'/'1' string into bytes
    Returns (packed_bytes, pad_bits) where pad_bits is number of 0 bits added at the end
    """
    out = bytearray()
    acc = 0
    acc_bits = 0

    for ch in bits:
        acc = (acc << 1) | (1 if ch == '1' else 0)
        acc_bits += 1
        if acc_bits == 8:
            out.append(acc & 0xFF)
            acc = 0
            acc_bits = 0

    pad_bits = 0
    if acc_bits != 0:
        pad_bits = 8 - acc_bits
        acc = acc << pad_bits
        out.append(acc & 0xFF)

    return bytes(out), pad_bits


def unpack_bits(packed: bytes, pad_bits: int) -> str:
    if not 0 <= pad_bits <= 7:
        raise ValueError(f"pad_bits must be between 0 and 7, got {pad_bits}")
    if not packed and pad_bits:
        raise ValueError("pad_bits given for an empty buffer")

    bits = ''.join(byte_to_bits(b) for b in packed)
    return bits[:len(bits) - pad_bits]


def fixed_width_bits(frequency_table: Dict, length: int) -> int:
    # Naive baseline: every symbol gets ceil(log2(alphabet)) bits, at least one
    alphabet = len(frequency_table)
    if alphabet == 0:
        return 0
    width = max(1, math.ceil(math.log2(alphabet)))
    return length * width
