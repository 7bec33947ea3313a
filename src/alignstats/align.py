import logging
from typing import Optional

from Bio.Align import PairwiseAligner, substitution_matrices

from alignstats.alignment import Alignment
from alignstats.errors import InvalidInputError
from alignstats.scheme import UNGAPPED_BLOSUM62, ScoringScheme

LOGGER = logging.getLogger(__name__)


def makeAligner(scheme: ScoringScheme = UNGAPPED_BLOSUM62) -> PairwiseAligner:
    """
    Make a Biopython local aligner that scores alignments the way a scoring
    scheme assumes.

    @param scheme: A C{ScoringScheme} instance.
    @return: A C{Bio.Align.PairwiseAligner} in local mode.
    """
    aligner = PairwiseAligner()
    aligner.mode = "local"
    aligner.substitution_matrix = substitution_matrices.load(scheme.matrix)
    # Biopython scores the first position of a gap with the open score, so
    # a gap of length k scores open + (k - 1) * extend.
    aligner.open_gap_score = scheme.gapExistence + scheme.gapExtension
    aligner.extend_gap_score = scheme.gapExtension
    return aligner


def localAlign(
    query: str,
    subject: str,
    scheme: ScoringScheme = UNGAPPED_BLOSUM62,
    aligner: Optional[PairwiseAligner] = None,
) -> Alignment:
    """
    Find the score of the best local alignment of a query and a subject.

    @param query: The C{str} query sequence.
    @param subject: The C{str} subject sequence.
    @param scheme: A C{ScoringScheme} instance, used to make an aligner if
        C{aligner} is not given.
    @param aligner: A C{Bio.Align.PairwiseAligner} to reuse (see
        L{makeAligner}), or C{None}.
    @raise InvalidInputError: If either sequence is empty.
    @return: An C{Alignment} with the raw score and the query length.
    """
    if not query:
        raise InvalidInputError("Empty query sequence.")
    if not subject:
        raise InvalidInputError("Empty subject sequence.")

    if aligner is None:
        aligner = makeAligner(scheme)

    score = float(aligner.score(query.upper(), subject.upper()))
    LOGGER.debug(
        "Local alignment of query (length %d) and subject (length %d) "
        "scored %s.",
        len(query),
        len(subject),
        score,
    )

    return Alignment(score, len(query))
