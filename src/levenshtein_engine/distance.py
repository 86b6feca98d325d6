import re
from functools import partial
from typing import Callable, Union

from .engine import bounded_levenshtein, levenshtein
from .types import UnitSequences

Text = Union[str, bytes, bytearray, memoryview]

_SURROGATE = re.compile("[\ud800-\udfff]")


def _as_bytes(text: Text, encoding: str) -> bytes:
    if isinstance(text, str):
        return text.encode(encoding)
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError(f"Expected str or bytes-like text, got {type(text).__name__}")


def _as_code_points(text: Text, encoding: str) -> str:
    if isinstance(text, str):
        # Lone surrogates are not Unicode scalar values
        match = _SURROGATE.search(text)
        if match:
            raise UnicodeEncodeError(
                "utf-8", text, match.start(), match.end(), "surrogates not allowed"
            )
        return text
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text).decode(encoding)
    raise TypeError(f"Expected str or bytes-like text, got {type(text).__name__}")


def to_units(
    a: Text, b: Text, byte_mode: bool, *, encoding: str = "utf-8"
) -> UnitSequences:
    """
    View both inputs as byte sequences or as code-point sequences.

    Byte mode matches code-point mode only for single-byte-per-character
    text such as ASCII.

    :param a: First text.
    :param b: Second text.
    :param byte_mode: If True, compare raw encoded bytes instead of characters.
    :param encoding: Codec used to encode str or decode bytes.
    :raises UnicodeDecodeError: If bytes input is malformed in code-point mode.
    :raises UnicodeEncodeError: If str input holds surrogates in code-point mode.
    :raises UnicodeEncodeError: If str input cannot be encoded in byte mode.
    """
    convert = _as_bytes if byte_mode else _as_code_points
    return UnitSequences(
        a=convert(a, encoding), b=convert(b, encoding), byte_mode=byte_mode
    )


def compute_edit_distance(
    a: Text, b: Text, byte_mode: bool = False, *, encoding: str = "utf-8"
) -> int:
    """
    Compute the Levenshtein distance between two pieces of text.

    :param a: First text.
    :param b: Second text.
    :param byte_mode: If True, compare raw encoded bytes instead of characters.
    :param encoding: Codec used to encode str or decode bytes.
    :returns: The edit distance in bytes or code points.
    """
    units = to_units(a, b, byte_mode, encoding=encoding)
    return levenshtein(units.a, units.b)


def check_edit_distance(
    a: Text,
    b: Text,
    max_distance: int,
    byte_mode: bool = False,
    *,
    encoding: str = "utf-8",
) -> bool:
    """
    Check if the edit distance between a and b is <= max_distance.

    :param a: First text.
    :param b: Second text.
    :param max_distance: Maximum allowed Levenshtein distance.
    :param byte_mode: If True, compare raw encoded bytes instead of characters.
    :param encoding: Codec used to encode str or decode bytes.
    """
    units = to_units(a, b, byte_mode, encoding=encoding)
    return bounded_levenshtein(units.a, units.b, max_distance)


def create_edit_distance(
    byte_mode: bool = False, *, encoding: str = "utf-8"
) -> Callable[[Text, Text], int]:
    """
    Create a distance function with the unit mode bound.

    :param byte_mode: If True, compare raw encoded bytes instead of characters.
    :param encoding: Codec used to encode str or decode bytes.
    """
    return partial(compute_edit_distance, byte_mode=byte_mode, encoding=encoding)
