"""
Draw the Huffman tree built for a piece of text

Leaves are laid out left to right in tree order, each internal node sits
midway between its children, depth grows downward. Edges are labelled with
the bit they stand for and every leaf with its symbol, weight and codeword.

How to run:
  python plot_tree.py "abracadabra" --out abracadabra.png
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, Tuple

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Circle

import huffman as huff


def layout(root) -> Dict[huff.HuffmanNode, Tuple[float, int]]:
    # post-order, so both children are placed before their parent
    positions = {}
    next_leaf_x = 0

    def place(node, depth):
        nonlocal next_leaf_x
        if node.is_leaf():
            positions[node] = (float(next_leaf_x), depth)
            next_leaf_x += 1
            return
        place(node.left, depth + 1)
        place(node.right, depth + 1)
        positions[node] = ((positions[node.left][0] + positions[node.right][0]) / 2, depth)

    if root is not None:
        place(root, 0)
    return positions


def plot_tree(tree: huff.HuffmanTree, path: Path, title: str = "Huffman Tree (left=0, right=1)") -> None:
    if not tree:
        raise ValueError("cannot draw a tree built from an empty frequency table")

    codes = huff.generate_huffman_codes(tree.leaves)
    positions = layout(tree.root)

    fig, ax = plt.subplots(figsize=(max(4, len(tree.leaves)), 6))

    for node, (x, depth) in positions.items():
        if node.is_leaf():
            continue
        for child, bit in ((node.left, "0"), (node.right, "1")):
            cx, cdepth = positions[child]
            ax.add_line(Line2D([x, cx], [-depth, -cdepth], color="darkblue"))
            ax.text((x + cx) / 2, -(depth + cdepth) / 2 + 0.1, bit, fontsize=9, ha="center", color="darkblue")

    for node, (x, depth) in positions.items():
        ax.add_patch(Circle((x, -depth), 0.12, facecolor="navy", edgecolor="black"))
        if node.is_leaf():
            ax.text(x, -depth - 0.25, f"{node.symbol!r}\n{node.weight}\n{codes[node.symbol]}",
                    fontsize=8, ha="center", va="top")
        else:
            ax.text(x + 0.18, -depth, str(node.weight), fontsize=8, ha="left", va="center")

    xs = [x for x, _ in positions.values()]
    max_depth = max(depth for _, depth in positions.values())
    ax.set_xlim(min(xs) - 0.8, max(xs) + 0.8)
    ax.set_ylim(-max_depth - 1.2, 0.5)
    ax.set_aspect("equal")
    ax.axis("off")
    ax.set_title(title)

    fig.tight_layout()
    fig.savefig(path, dpi=200)
    plt.close(fig)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("text", help="Text whose symbol statistics define the tree")
    ap.add_argument("--out", type=str, default="huffman_tree.png", help="Output image path")
    args = ap.parse_args(argv)

    if not args.text:
        print("Nothing to draw: empty text")
        return 1

    tree = huff.build_huffman_tree(huff.statistics(args.text))
    out = Path(args.out)
    plot_tree(tree, out, title=f"Huffman Tree for {args.text!r}")
    print(f"Drew {len(tree.leaves)} leaves (root weight {tree.root.weight}) to {out.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
