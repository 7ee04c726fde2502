"""Bootstring encoding with the Punycode parameters of RFC 3492.

The encoder works on sequences of integer code points, not on ``str``, so it
can be fed straight from the UTF-8 decoder and tested against the RFC sample
strings without any text handling in between.

Encoding one label:
 - basic code points (< 0x80) are copied first, in their original order and case
 - a ``-`` delimiter follows if at least one basic code point was copied
 - every non-basic code point is then described, in increasing code point order,
   by a delta written as a generalized variable-length integer whose digit
   thresholds follow an adaptive bias

Usage:
    from idna_mcp_server.codec.bootstring import encode_label
    encode_label([ord(c) for c in "bücher"])   # "xn--bcher-kva"
"""

from typing import List, Sequence

BASE = 36
TMIN = 1
TMAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 0x80
DELIMITER = "-"
ACE_PREFIX = "xn--"

# Digit values 0-25 map to a-z, 26-35 to 0-9.
DIGITS = "abcdefghijklmnopqrstuvwxyz0123456789"


def is_basic(code_point: int) -> bool:
    """Return True for code points copied literally into the output."""
    return code_point < INITIAL_N


def threshold(k: int, bias: int) -> int:
    """Digit threshold for position ``k`` (a multiple of BASE), clamped to [TMIN, TMAX]."""
    if k <= bias:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def adapt(delta: int, numpoints: int, first_time: bool) -> int:
    """Compute the bias used for the next delta (RFC 3492 section 6.1).

    Args:
        delta: The delta that was just encoded.
        numpoints: Number of code points handled so far, this one included.
        first_time: True for the first delta of a label.

    Returns:
        int: The new bias.
    """
    delta = delta // DAMP if first_time else delta // 2
    delta += delta // numpoints
    k = 0
    # ((BASE - TMIN) * TMAX) // 2 == 455
    while delta > ((BASE - TMIN) * TMAX) // 2:
        delta //= BASE - TMIN
        k += BASE
    return k + ((BASE - TMIN + 1) * delta) // (delta + SKEW)


def encode_integer(value: int, bias: int) -> str:
    """Write ``value`` as a generalized variable-length integer."""
    digits = []
    k = BASE
    while True:
        t = threshold(k, bias)
        if value < t:
            digits.append(DIGITS[value])
            return "".join(digits)
        digits.append(DIGITS[t + (value - t) % (BASE - t)])
        value = (value - t) // (BASE - t)
        k += BASE


def punycode_encode(code_points: Sequence[int]) -> str:
    """Encode a code point sequence to its Punycode form, without ACE prefix.

    Args:
        code_points: The code points of one label.

    Returns:
        str: Basic code points, delimiter (when any basic code point exists)
        and the encoded deltas.
    """
    output: List[str] = [chr(c) for c in code_points if is_basic(c)]
    basic_count = len(output)
    if basic_count:
        output.append(DELIMITER)

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS
    handled = basic_count
    total = len(code_points)

    while handled < total:
        m = min(c for c in code_points if c >= n)
        delta += (m - n) * (handled + 1)
        n = m
        for c in code_points:
            if c < n:
                delta += 1
            elif c == n:
                output.append(encode_integer(delta, bias))
                bias = adapt(delta, handled + 1, handled == basic_count)
                delta = 0
                handled += 1
        delta += 1
        n += 1

    return "".join(output)


def encode_label(code_points: Sequence[int]) -> str:
    """Return the ACE form of one label.

    All-basic labels, including the empty label and labels that are already
    ACE encoded, are returned unchanged. Anything else becomes ``xn--``
    followed by its Punycode encoding.
    """
    if all(is_basic(c) for c in code_points):
        return "".join(chr(c) for c in code_points)
    return ACE_PREFIX + punycode_encode(code_points)
