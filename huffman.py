import heapq


class HuffmanError(Exception): # base class for errors raised by the coder
    pass


class SymbolNotFoundError(HuffmanError, LookupError):
    def __init__(self, symbol):
        super().__init__(f"symbol {symbol!r} has no entry in the frequency table")
        self.symbol = symbol


class StreamTruncatedError(HuffmanError, ValueError):
    def __init__(self, position: int, depth: int, message: str = None):
        super().__init__(message or f"bit stream ended mid-codeword after {position} bits (cursor depth {depth})")
        self.position = position # number of bits consumed
        self.depth = depth # how far below the root the cursor was left


class HuffmanNode: # common part of Leaf and Internal
    def __init__(self, weight):
        self.weight = weight
        self.parent = None # owning Internal node, set once when merged

    def is_leaf(self) -> bool:
        return False

    def is_root(self) -> bool:
        return self.parent is None

    def is_left_child(self) -> bool:
        parent = self.parent
        return parent is not None and parent.left is self


class Leaf(HuffmanNode):
    def __init__(self, symbol, weight):
        super().__init__(weight)
        self.symbol = symbol

    @property
    def symbols(self):
        return (self.symbol,)

    def is_leaf(self) -> bool:
        return True

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.weight})"


class Internal(HuffmanNode):
    def __init__(self, left, right):
        super().__init__(left.weight + right.weight)
        self.left = left
        self.right = right
        self.symbols = left.symbols + right.symbols # union of the subtree, diagnostic only
        left.parent = self
        right.parent = self

    def __repr__(self):
        return f"Internal({self.weight}, {self.symbols!r})"


class HuffmanTree:
    def __init__(self, root, leaves):
        self.root = root # None for an empty frequency table
        self.leaves = leaves # leaf nodes in frequency table order

    def __bool__(self):
        return self.root is not None


def statistics(sequence) -> dict: # sequence: str, bytes or any iterable of hashable symbols
    frequency_table = {}
    for symbol in sequence:
        frequency_table[symbol] = frequency_table.get(symbol, 0) + 1
    return frequency_table


def build_huffman_tree(frequency_table) -> HuffmanTree: # frequency_table: dict of symbol -> frequency
    """
    Merge the two lightest nodes until one is left.

    Heap entries are (weight, sequence number, node). The sequence number
    grows with every push, so equal weights come out in insertion order and
    two builds from the same table always give the same tree.
    """
    leaves = []
    priority_queue = []
    for sequence_number, (symbol, frequency) in enumerate(frequency_table.items()):
        if frequency < 0:
            raise ValueError(f"frequency of {symbol!r} must not be negative, got {frequency}")
        if frequency == 0:
            continue # symbol never occurs, it gets no leaf
        leaf = Leaf(symbol, frequency)
        leaves.append(leaf)
        priority_queue.append((frequency, sequence_number, leaf))
    heapq.heapify(priority_queue)

    if not priority_queue:
        return HuffmanTree(None, leaves)

    sequence_number = len(priority_queue)
    for _ in range(len(leaves) - 1):
        _, _, left = heapq.heappop(priority_queue) # first removed goes left
        _, _, right = heapq.heappop(priority_queue)
        merged_node = Internal(left, right)
        heapq.heappush(priority_queue, (merged_node.weight, sequence_number, merged_node))
        sequence_number += 1

    return HuffmanTree(priority_queue[0][2], leaves)


def generate_huffman_codes(leaves) -> dict: # leaves: leaf nodes of one Huffman tree
    codes = {}
    for leaf in leaves:
        if leaf.is_root():
            # Lone symbol -> no edges to read, use a fixed one bit code
            codes[leaf.symbol] = '0'
            continue

        bits = []
        node = leaf
        while not node.is_root():
            bits.append('0' if node.is_left_child() else '1')
            node = node.parent
        codes[leaf.symbol] = ''.join(reversed(bits))
    return codes


def huffman_encode(sequence, code_map: dict) -> str:
    try:
        return ''.join([code_map[symbol] for symbol in sequence])
    except KeyError as e:
        raise SymbolNotFoundError(e.args[0]) from None


def huffman_decode(bitstring: str, tree: HuffmanTree) -> list:
    root = tree.root
    if root is None:
        if bitstring:
            raise StreamTruncatedError(len(bitstring), 0,
                                       f"{len(bitstring)} bits given but the frequency table is empty")
        return []

    if root.is_leaf():
        # Every bit is one whole codeword
        return [root.symbol] * len(bitstring)

    decoded = []
    current_node = root
    depth = 0
    for bit in bitstring:
        current_node = current_node.left if bit == '0' else current_node.right
        depth += 1
        if current_node.is_leaf():
            decoded.append(current_node.symbol)
            current_node = root # back to the root for the next symbol
            depth = 0

    if current_node is not root:
        raise StreamTruncatedError(len(bitstring), depth)
    return decoded


def _default_join(frequency_table):
    # text in, text out; anything else comes back as a list
    if all(isinstance(key, str) and len(key) == 1 for key in frequency_table):
        return ''.join
    return list


def encode(sequence, frequency_table) -> str:
    """
    Encode ``sequence`` into a string of '0'/'1' characters.

    Every symbol of ``sequence`` needs an entry in ``frequency_table``;
    a missing one raises SymbolNotFoundError.
    """
    if not sequence:
        return ''
    tree = build_huffman_tree(frequency_table)
    code_map = generate_huffman_codes(tree.leaves)
    return huffman_encode(sequence, code_map)


def decode(bitstring: str, frequency_table, join=None):
    """
    Decode a bit string produced by encode() with the same frequency table.

    ``join`` turns the list of decoded symbols into the result, e.g. ``list``
    for a list of characters or ``bytes`` for byte data. By default the
    result is a str when every symbol is a single character and a list
    otherwise.
    """
    if join is None:
        join = _default_join(frequency_table)
    if not bitstring:
        return join([])
    tree = build_huffman_tree(frequency_table)
    return join(huffman_decode(bitstring, tree))
