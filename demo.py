"""
Huffman round trip demo

Encodes a piece of text with a code built from its own statistics, decodes it
back and prints the byte level binary strings of the same text under a few
character encodings for comparison.

How to run:
  python demo.py
  python demo.py "abracadabra" --encodings utf-8,utf-16
"""

from __future__ import annotations

import argparse
from typing import List

import huffman as huff
from bitstrings import text_to_bits, pack_bits, unpack_bits


SAMPLE_TEXT = (
    "Huffman codes compress data very effectively: savings of 20% to 90% are typical, "
    "depending on the characteristics of the data being compressed. 中华崛起"
)

DEFAULT_ENCODINGS = "utf-8,utf-16,us-ascii,gb2312"


def parse_csv_list(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


def main(argv=None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("text", nargs="?", default=SAMPLE_TEXT, help="Text to encode (default: built-in sample)")
    ap.add_argument("--encodings", type=str, default=DEFAULT_ENCODINGS,
                    help="Comma-separated codec names to render the text's bytes under")
    args = ap.parse_args(argv)

    text = args.text
    ft = huff.statistics(text)
    encoded = huff.encode(text, ft)
    packed, pad_bits = pack_bits(encoded)
    decoded = huff.decode(unpack_bits(packed, pad_bits), ft)

    print(f"Original string: {text}")
    print(f"Huffman encoded binary string: {encoded}")
    print(f"Decoded string from binary string: {decoded}")

    for encoding in parse_csv_list(args.encodings):
        bits = text_to_bits(text, encoding)
        print(f"Binary string of {encoding.upper()} ({len(bits)} bits): {bits}")

    print(f"Huffman: {len(encoded)} bits for {len(text)} symbols ({len(ft)} distinct)")
    print(f"Packed: {len(packed)} bytes ({pad_bits} pad bits)")
    return 0 if decoded == text else 1


if __name__ == "__main__":
    raise SystemExit(main())
