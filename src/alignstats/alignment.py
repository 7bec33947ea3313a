from collections import namedtuple
from typing import Protocol


class AlignmentResult(Protocol):
    """
    The read-only view of an alignment that the statistics code needs. Any
    object with these two attributes can be scored.
    """
    rawScore: float
    queryLength: int


# The score of a local alignment and the length of the query sequence that
# was aligned.
Alignment = namedtuple("Alignment", ("rawScore", "queryLength"))
