from collections import namedtuple

from alignstats.errors import InvalidConfigurationError

# The calibration constants (K, lambda) of a local alignment scoring
# scheme, together with the substitution matrix and the BLAST-style gap
# costs (a gap of length k scores gapExistence + k * gapExtension) that the
# raw scores are assumed to have been computed with.
ScoringScheme = namedtuple(
    "ScoringScheme",
    ("name", "K", "lambda_", "matrix", "gapExistence", "gapExtension"),
)

# Constants for ungapped local alignments. These are the defaults.
UNGAPPED_BLOSUM62 = ScoringScheme(
    name="ungapped",
    K=0.134,
    lambda_=0.318,
    matrix="BLOSUM62",
    gapExistence=-11,
    gapExtension=-1,
)

# The classical calibration for gapped BLOSUM-62 alignments with a gap
# existence penalty of -11 and a gap extension penalty of -1. See
# http://www.ncbi.nlm.nih.gov/BLAST/tutorial/Altschul-1.html
GAPPED_BLOSUM62 = ScoringScheme(
    name="gapped",
    K=0.035,
    lambda_=0.252,
    matrix="BLOSUM62",
    gapExistence=-11,
    gapExtension=-1,
)

SCHEMES = {
    UNGAPPED_BLOSUM62.name: UNGAPPED_BLOSUM62,
    GAPPED_BLOSUM62.name: GAPPED_BLOSUM62,
}


def getScheme(name: str) -> ScoringScheme:
    """
    Look up a predefined scoring scheme.

    @param name: The C{str} name of the scheme, one of the keys of
        C{SCHEMES}.
    @raise InvalidConfigurationError: If C{name} is not a known scheme.
    @return: A C{ScoringScheme} instance.
    """
    try:
        return SCHEMES[name]
    except KeyError:
        raise InvalidConfigurationError(
            f"Unknown scoring scheme {name!r}. Known schemes are "
            f"{', '.join(sorted(SCHEMES))}."
        ) from None


def checkScheme(scheme: ScoringScheme) -> None:
    """
    Check that the calibration constants of a scheme are usable.

    @param scheme: A C{ScoringScheme} instance.
    @raise InvalidConfigurationError: If K or lambda is not a positive
        number. NaN values are rejected.
    """
    for what, value in ("K", scheme.K), ("lambda", scheme.lambda_):
        try:
            positive = value > 0
        except TypeError:
            raise InvalidConfigurationError(
                f"Scoring scheme {scheme.name!r} {what} value {value!r} is "
                "not a number."
            )
        if not positive:
            raise InvalidConfigurationError(
                f"Scoring scheme {scheme.name!r} {what} value {value!r} "
                "must be greater than zero."
            )
