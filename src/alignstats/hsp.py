from functools import total_ordering
from typing import Optional

from alignstats.alignment import AlignmentResult


@total_ordering
class _Base:
    """
    Holds a significance score for an alignment and makes it easy to rank
    alignments by it.

    You should not use this class directly. Use one of its subclasses,
    either HSP or LSP, depending on whether you want numerically higher
    scores to be considered better (HSP, for bit scores) or worse (LSP, for
    e-values). In both cases "less than" means "worse than", so sorting a
    list of instances with C{reverse=True} puts the best alignment first.

    @param score: The numeric C{float} score.
    @param alignment: The alignment the score was computed for, or C{None}.
    """

    def __init__(
        self, score: float, alignment: Optional[AlignmentResult] = None
    ) -> None:
        self.score = score
        self.alignment = alignment

    def __lt__(self, other: object) -> bool:
        if isinstance(other, type(self)):
            return other.betterThan(self.score)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if isinstance(other, type(self)):
            return self.score == other.score
        return NotImplemented

    def betterThan(self, score: float) -> bool:
        """
        Compare this instance's score with another score. Subclasses must
        implement this.

        @param score: A C{float} score.
        @raise NotImplementedError: When called on C{_Base} itself.
        @return: A C{bool}, C{True} if this score is the better.
        """
        raise NotImplementedError("betterThan must be implemented by a subclass")

    def toDict(self) -> dict:
        """
        Get information about the HSP/LSP as a dictionary.

        @return: A C{dict} representation of the HSP/LSP.
        """
        result = {"score": self.score}
        if self.alignment is not None:
            result["rawScore"] = self.alignment.rawScore
            result["queryLength"] = self.alignment.queryLength
        return result


class HSP(_Base):
    """
    Holds a high-scoring pair. Comparisons are done as for bit scores
    (higher is better).
    """

    def betterThan(self, score: float) -> bool:
        """
        Compare this instance's score with another score.

        @param score: A C{float} score.
        @return: A C{bool}, C{True} if this score is the better.
        """
        return self.score > score


class LSP(_Base):
    """
    Holds a low-scoring pair. Comparisons are done as for e-values (smaller
    is better).
    """

    def betterThan(self, score: float) -> bool:
        """
        Compare this instance's score with another score.

        @param score: A C{float} score.
        @return: A C{bool}, C{True} if this score is the better.
        """
        return self.score < score
