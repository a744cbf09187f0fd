"""
Input validation - compare one user selection with the expected sequence
"""

import enum
from typing import Sequence

from .signals import Signal


class Verdict(enum.Enum):
    MATCH = "match"
    MISMATCH = "mismatch"
    SEQUENCE_COMPLETE = "sequence_complete"


def validate_input(expected: Sequence[Signal], cursor: int, chosen: Signal) -> Verdict:
    """
    Judge the user's choice at position `cursor` of the expected sequence.

    Pure function: advancing the cursor on MATCH is the caller's job.
    The caller guarantees 0 <= cursor < len(expected); phase gating in the
    controller makes other calls unreachable.

    Args:
        expected: Sequence the user must reproduce
        cursor: Index of the next expected signal
        chosen: Signal the user selected

    Returns:
        MISMATCH if chosen is wrong, SEQUENCE_COMPLETE if it was the last
        expected signal, MATCH otherwise
    """
    if chosen != expected[cursor]:
        return Verdict.MISMATCH
    if cursor + 1 == len(expected):
        return Verdict.SEQUENCE_COMPLETE
    return Verdict.MATCH
