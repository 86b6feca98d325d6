from dataclasses import dataclass

# Reference counter width for distances and input lengths.
U32_MAX = 2**32 - 1


@dataclass(slots=True)
class UnitSequences:
    """Two inputs viewed in the same unit mode (both bytes or both str)."""
    a: bytes | str
    b: bytes | str
    byte_mode: bool
