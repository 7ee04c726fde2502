"""IDNA ToASCII codec: strict UTF-8 decoding, label splitting and Punycode."""

from .ace import DEFAULT_BUFFER_SIZE, idna_to_ascii, to_ascii
from .bootstring import encode_label, punycode_encode
from .labels import is_label_delimiter, split_labels
from .utf8 import INVALID_CODE_POINT, decode_code_point, iter_code_points

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "INVALID_CODE_POINT",
    "decode_code_point",
    "encode_label",
    "idna_to_ascii",
    "is_label_delimiter",
    "iter_code_points",
    "punycode_encode",
    "split_labels",
    "to_ascii",
]
