"""
graph6 / digraph6 / sparse6 decoding and graph6 encoding.

All three formats pack data into printable ASCII: each byte carries six bits,
biased by 63 (so byte values lie in 63..126). The vertex count comes first:
- n <= 62: one byte
- otherwise: byte 126 then three bytes (18-bit n), or bytes 126, 126 then
  six bytes (36-bit n)

Then, per format:
- graph6: upper triangle of the adjacency matrix in column order
- digraph6 ('&' prefix): full n x n matrix, row-major
- sparse6 (':' prefix): a stream of (b, x) records listing edges

Only graphs with 1..64 vertices are accepted.
"""

from pathlib import Path
from typing import Iterator, List, Tuple, Union

from ..core import BitGraph, MAX_VERTICES

BIAS = 63
SMALL_N = 62
_HEADERS = (">>graph6<<", ">>sparse6<<", ">>digraph6<<")


class GraphFormatError(ValueError):
    """Input line is not a valid encoding of a supported graph."""


def parse_graph(line: str) -> BitGraph:
    """
    Decode one graph6, digraph6 or sparse6 line.

    Args:
        line: Encoded graph, optionally with a >>graph6<< style header and
            surrounding whitespace

    Returns:
        Decoded BitGraph

    Raises:
        GraphFormatError: on malformed input or an unsupported vertex count
    """
    text = line.strip()
    for header in _HEADERS:
        if text.startswith(header):
            text = text[len(header):]
            break

    if not text:
        raise GraphFormatError("Empty graph string")
    if text[0] == ":":
        return _parse_sparse6(text[1:])
    if text[0] == "&":
        return _parse_digraph6(text[1:])
    return _parse_graph6(text)


def _to_values(text: str) -> List[int]:
    """Strip the bias from every byte."""
    values = []
    for pos, ch in enumerate(text):
        value = ord(ch) - BIAS
        if not 0 <= value <= 63:
            raise GraphFormatError(f"Invalid character {ch!r} at position {pos}")
        values.append(value)
    return values


def _decode_size(values: List[int]) -> Tuple[int, int]:
    """
    Read the vertex count header.

    Returns:
        (n, number of bytes consumed)
    """
    if not values:
        raise GraphFormatError("Missing vertex count")

    if values[0] <= SMALL_N:
        n, used = values[0], 1
    elif len(values) >= 2 and values[1] == 63:
        if len(values) < 8:
            raise GraphFormatError("Truncated 8-byte vertex count")
        n = 0
        for value in values[2:8]:
            n = (n << 6) | value
        used = 8
    else:
        if len(values) < 4:
            raise GraphFormatError("Truncated 4-byte vertex count")
        n = (values[1] << 12) | (values[2] << 6) | values[3]
        used = 4

    if not 1 <= n <= MAX_VERTICES:
        raise GraphFormatError(
            f"Graph order {n} outside supported range [1, {MAX_VERTICES}]"
        )
    return n, used


def _body_bits(body: List[int], num_bits: int) -> Iterator[int]:
    """Bits of the 6-bit values, most significant first, after a length check."""
    expected = (num_bits + 5) // 6
    if len(body) != expected:
        raise GraphFormatError(
            f"Expected {expected} data bytes for {num_bits} bits, got {len(body)}"
        )
    return ((value >> shift) & 1 for value in body for shift in range(5, -1, -1))


def _parse_graph6(text: str) -> BitGraph:
    values = _to_values(text)
    n, used = _decode_size(values)
    graph = BitGraph(n)

    bits = _body_bits(values[used:], n * (n - 1) // 2)
    for j in range(1, n):
        for i in range(j):
            if next(bits):
                graph.add_edge(i, j)

    return graph.freeze()


def _parse_digraph6(text: str) -> BitGraph:
    """Decode digraph6, forgetting arc directions."""
    values = _to_values(text)
    n, used = _decode_size(values)
    graph = BitGraph(n)

    bits = _body_bits(values[used:], n * n)
    for i in range(n):
        for j in range(n):
            if next(bits) and i != j and not graph.has_edge(i, j):
                graph.add_edge(i, j)

    return graph.freeze()


def _sparse6_records(data: List[int], k: int) -> Iterator[Tuple[int, int]]:
    """
    Yield (b, x) records: one flag bit followed by a k-bit vertex index.

    Stops silently when the data runs out mid-record (trailing padding).
    """
    chunks = iter(data)
    d = 0
    d_len = 0  # Unread low bits remaining in d

    while True:
        if d_len < 1:
            d = next(chunks, None)
            if d is None:
                return
            d_len = 6

        d_len -= 1
        b = (d >> d_len) & 1

        x = d & ((1 << d_len) - 1)
        x_len = d_len
        while x_len < k:
            d = next(chunks, None)
            if d is None:
                return
            d_len = 6
            x = (x << 6) | d
            x_len += 6

        x >>= x_len - k
        d_len = x_len - k
        yield b, x


def _parse_sparse6(text: str) -> BitGraph:
    """Decode sparse6, dropping loops and repeated edges."""
    values = _to_values(text)
    n, used = _decode_size(values)
    graph = BitGraph(n)

    k = max(1, (n - 1).bit_length())
    v = 0
    for b, x in _sparse6_records(values[used:], k):
        if b:
            v += 1
        if x >= n or v >= n:
            break  # Padding
        if x > v:
            v = x
        elif x != v and not graph.has_edge(x, v):
            graph.add_edge(x, v)

    return graph.freeze()


def _encode_size(n: int) -> str:
    if n <= SMALL_N:
        return chr(n + BIAS)
    return chr(63 + BIAS) + "".join(
        chr(((n >> shift) & 63) + BIAS) for shift in (12, 6, 0)
    )


def to_graph6(graph: BitGraph) -> str:
    """Encode graph as canonical graph6 (no header, no newline)."""
    n = graph.num_vertices
    adjacency = graph.adjacency
    bits = [(adjacency[i] >> j) & 1 for j in range(1, n) for i in range(j)]

    chars = [_encode_size(n)]
    for start in range(0, len(bits), 6):
        chunk = bits[start:start + 6]
        value = 0
        for bit in chunk:
            value = (value << 1) | bit
        value <<= 6 - len(chunk)
        chars.append(chr(value + BIAS))

    return "".join(chars)


def read_graph_file(path: Union[str, Path]) -> Iterator[Tuple[str, BitGraph]]:
    """
    Decode a file with one encoded graph per line.

    Yields:
        (stripped line, graph) for every non-blank line

    Raises:
        GraphFormatError: naming the offending line number
    """
    with open(path, "r", encoding="ascii") as f:
        for line_no, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line:
                continue
            try:
                graph = parse_graph(line)
            except GraphFormatError as e:
                raise GraphFormatError(f"{path}:{line_no}: {e}") from e
            yield line, graph


def count_graph_lines(path: Union[str, Path]) -> int:
    """Number of non-blank lines in a graph file."""
    with open(path, "r", encoding="ascii") as f:
        return sum(1 for line in f if line.strip())
