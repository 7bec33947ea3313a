import logging
from math import log
from typing import Optional, Union

import numpy as np

from alignstats.alignment import AlignmentResult
from alignstats.errors import InvalidConfigurationError, InvalidInputError
from alignstats.hsp import HSP, LSP
from alignstats.scheme import (
    UNGAPPED_BLOSUM62,
    ScoringScheme,
    checkScheme,
    getScheme,
)

LOGGER = logging.getLogger(__name__)

_LOG2 = log(2.0)


def _checkLength(length, what: str, error: type) -> None:
    # NaN fails the comparison, so it is rejected along with negatives.
    try:
        nonNegative = length >= 0
    except TypeError:
        raise error(f"{what} {length!r} is not a number.") from None
    if not nonNegative:
        raise error(f"{what} {length!r} must not be negative.")


def _checkQueryLength(queryLength: int) -> None:
    _checkLength(queryLength, "Query length", InvalidInputError)


def _exp(x: float) -> float:
    # Overflow gives inf and underflow gives 0.0, rather than an
    # OverflowError as with math.exp.
    with np.errstate(over="ignore", under="ignore"):
        return float(np.exp(x))


class AlignmentStatistics:
    """
    Compute the raw score, bit score, and e-value of local alignments made
    by matching a query against a database of subject sequences.

    The formulas are

        S' = (lambda * S - ln K) / ln 2
        E = K * m * n * exp(-lambda * S)

    where S is the raw score, S' the bit score, E the e-value, m the query
    length, and n the sum of the lengths of the subject sequences. See
    http://www.ncbi.nlm.nih.gov/BLAST/tutorial/Altschul-1.html and
    http://www.ncbi.nlm.nih.gov/BLAST/tutorial/Altschul-3.html

    K and lambda depend on the substitution matrix and gap penalties used
    to compute the raw scores. The default scheme uses the constants for
    ungapped BLOSUM-62 alignments. Nothing here checks that the alignments
    passed in were actually computed that way.

    Instances cannot be modified once made, so one can be shared by any
    number of callers.

    @param dbLength: The C{int} sum of the lengths of the subject sequences
        in the database.
    @param K: A C{float} K value to use instead of the one in C{scheme}.
    @param lambda_: A C{float} lambda value to use instead of the one in
        C{scheme}.
    @param scheme: A C{ScoringScheme} instance, or the C{str} name of one of
        the schemes in C{alignstats.scheme.SCHEMES}.
    @raise InvalidConfigurationError: If C{dbLength} is negative or not a
        number (NaN included), if K or lambda is not greater than zero, or if
        C{scheme} is an unknown name.
    """

    def __init__(
        self,
        dbLength: int,
        K: Optional[float] = None,
        lambda_: Optional[float] = None,
        scheme: Union[ScoringScheme, str] = UNGAPPED_BLOSUM62,
    ) -> None:
        if isinstance(scheme, str):
            scheme = getScheme(scheme)

        if K is not None:
            scheme = scheme._replace(K=K)
        if lambda_ is not None:
            scheme = scheme._replace(lambda_=lambda_)

        checkScheme(scheme)

        _checkLength(dbLength, "Database length", InvalidConfigurationError)

        self._scheme = scheme
        self._dbLength = dbLength
        self._lnK = log(scheme.K)

        LOGGER.debug(
            "Alignment statistics for scheme %r: K=%r, lambda=%r, "
            "database length %d.",
            scheme.name,
            scheme.K,
            scheme.lambda_,
            dbLength,
        )

    @property
    def scheme(self) -> ScoringScheme:
        return self._scheme

    @property
    def K(self) -> float:
        return self._scheme.K

    @property
    def lambda_(self) -> float:
        return self._scheme.lambda_

    @property
    def dbLength(self) -> int:
        return self._dbLength

    def rawScore(self, alignment: AlignmentResult) -> float:
        """
        Get the raw score of an alignment. A larger raw score signifies a
        greater degree of similarity between the query and subject.

        @param alignment: An alignment, with C{rawScore} and C{queryLength}
            attributes.
        @return: The C{float} raw score.
        """
        return alignment.rawScore

    def bitScore(self, alignment: AlignmentResult) -> float:
        """
        Get the bit score of an alignment. A larger bit score signifies a
        greater degree of similarity between the query and subject.

        The bit score is the raw score normalized to units of bits. Unlike
        raw scores, bit scores for different scoring schemes may be
        compared.

        @param alignment: An alignment, with C{rawScore} and C{queryLength}
            attributes.
        @raise InvalidInputError: If the alignment query length is negative or
            NaN.
        @return: The C{float} bit score.
        """
        _checkQueryLength(alignment.queryLength)
        return (self._scheme.lambda_ * alignment.rawScore - self._lnK) / _LOG2

    def expectValue(self, alignment: AlignmentResult) -> float:
        """
        Get the e-value of an alignment. A smaller e-value signifies a more
        statistically significant similarity between the query and subject.

        The e-value is the number of alignments with a score at least as
        high as that of C{alignment} that would be expected when a random
        query of the same length is matched against the database.

        @param alignment: An alignment, with C{rawScore} and C{queryLength}
            attributes.
        @raise InvalidInputError: If the alignment query length is negative or
            NaN.
        @return: The C{float} e-value. This is C{0.0} for alignments too
            strong to represent and C{inf} for extremely weak ones.
        """
        queryLength = alignment.queryLength
        _checkQueryLength(queryLength)
        scheme = self._scheme
        return (
            scheme.K
            * queryLength
            * self._dbLength
            * _exp(-scheme.lambda_ * alignment.rawScore)
        )

    def hsp(self, alignment: AlignmentResult) -> HSP:
        """
        Make an HSP holding the bit score of an alignment.

        @param alignment: An alignment, with C{rawScore} and C{queryLength}
            attributes.
        @return: An C{HSP} instance.
        """
        return HSP(self.bitScore(alignment), alignment=alignment)

    def lsp(self, alignment: AlignmentResult) -> LSP:
        """
        Make an LSP holding the e-value of an alignment.

        @param alignment: An alignment, with C{rawScore} and C{queryLength}
            attributes.
        @return: An C{LSP} instance.
        """
        return LSP(self.expectValue(alignment), alignment=alignment)

    def describe(self) -> dict:
        """
        Get the configuration of this instance.

        @return: A C{dict} with the scoring scheme name, K, lambda,
            substitution matrix, gap penalties and database length.
        """
        scheme = self._scheme
        return {
            "name": scheme.name,
            "K": scheme.K,
            "lambda": scheme.lambda_,
            "matrix": scheme.matrix,
            "gapExistence": scheme.gapExistence,
            "gapExtension": scheme.gapExtension,
            "dbLength": self._dbLength,
        }

    def summary(self) -> str:
        """
        Summarize the configuration of this instance for printing.

        @return: A C{str} with one line each for K, lambda, the substitution
            matrix and the gap penalties.
        """
        scheme = self._scheme
        return "\n".join(
            (
                f"K: {scheme.K}",
                f"Lambda: {scheme.lambda_}",
                f"Matrix: {scheme.matrix}",
                f"Gap Penalties: Existence: {scheme.gapExistence}, "
                f"Extension: {scheme.gapExtension}",
            )
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self._dbLength!r}, "
            f"scheme={self._scheme!r})"
        )


def bitScoreToEValue(bitScore: float, queryLength: int, dbLength: int) -> float:
    """
    Convert a bit score to an e-value.

    For scores computed by L{AlignmentStatistics}, this gives the same
    value as C{expectValue} without needing K or lambda.

    @param bitScore: The C{float} bit score to convert.
    @param queryLength: The C{int} length of the query.
    @param dbLength: The C{int} total size of the database (i.e., the sum of
        the lengths of all its sequences).
    @raise InvalidInputError: If either length is negative.
    @return: A C{float} e-value.
    """
    _checkQueryLength(queryLength)
    _checkLength(dbLength, "Database length", InvalidInputError)
    with np.errstate(over="ignore", under="ignore"):
        return queryLength * dbLength * float(np.exp2(-bitScore))


def eValueToBitScore(eValue: float, queryLength: int, dbLength: int) -> float:
    """
    Convert an e-value to a bit score.

    @param eValue: The C{float} e-value to convert.
    @param queryLength: The C{int} length of the query.
    @param dbLength: The C{int} total size of the database (i.e., the sum of
        the lengths of all its sequences).
    @raise InvalidInputError: If either length is not positive, or if the
        e-value is not positive.
    @return: A C{float} bit score.
    """
    _checkQueryLength(queryLength)
    _checkLength(dbLength, "Database length", InvalidInputError)
    if queryLength == 0 or dbLength == 0:
        raise InvalidInputError(
            f"Query length {queryLength!r} and database length {dbLength!r} "
            "must both be positive."
        )
    if not eValue > 0:
        raise InvalidInputError(f"E-value {eValue!r} must be positive.")
    return -1.0 * (log(eValue / (queryLength * dbLength)) / _LOG2)
