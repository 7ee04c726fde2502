"""Label splitting for dotted domain names."""

from typing import Iterable, Iterator, List

# FULL STOP, IDEOGRAPHIC FULL STOP, FULLWIDTH FULL STOP, HALFWIDTH IDEOGRAPHIC FULL STOP
LABEL_DELIMITERS = frozenset((0x002E, 0x3002, 0xFF0E, 0xFF61))


def is_label_delimiter(code_point: int) -> bool:
    """Return True if the code point separates two labels."""
    return code_point in LABEL_DELIMITERS


def split_labels(code_points: Iterable[int]) -> Iterator[List[int]]:
    """Group a code point stream into labels.

    The stream is consumed lazily and every label is yielded as soon as its
    delimiter is seen. Empty labels are yielded too, so ``n`` delimiters always
    produce ``n + 1`` labels and an empty input produces a single empty label.

    Args:
        code_points: Iterable of decoded code points.

    Yields:
        List[int]: The code points of one label, delimiter excluded.
    """
    label: List[int] = []
    for code_point in code_points:
        if is_label_delimiter(code_point):
            yield label
            label = []
        else:
            label.append(code_point)
    yield label
