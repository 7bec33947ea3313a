class InvalidConfigurationError(ValueError):
    """Alignment statistics were configured with unusable parameters."""


class InvalidInputError(ValueError):
    """An alignment passed for scoring does not meet the input contract."""
