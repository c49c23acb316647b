class AnalysisError(Exception):
    """Base class for failures raised by the analysis layer."""


class InvalidInputError(AnalysisError, ValueError):
    """The request cannot be computed: bad dataset, missing or unknown parameters."""
