"""Failures surfaced by the analysis pipeline."""


class AnalysisError(Exception):
    """Base class for a failed analysis call. Always carries a readable message."""

    default_message = "Analysis failed"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyDatasetError(AnalysisError):
    """The source contained no usable rows."""

    default_message = "No data found"


class ParseError(AnalysisError):
    """The tabular parser rejected the source."""

    default_message = "Could not parse the uploaded file"

    @classmethod
    def wrap(cls, exc: BaseException) -> "ParseError":
        return cls(str(exc) or type(exc).__name__)
