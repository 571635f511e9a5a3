class ExtractionError(Exception):
    """Base for all scorecard extraction errors."""


class ExtractionServiceError(ExtractionError):
    """The AI service could not be reached or returned an error."""


class InvalidFormatError(ExtractionError):
    """The AI answered, but not with a scorecard we can parse."""

    DEFAULT_MESSAGE = (
        "The AI returned an invalid data format. "
        "Please try again with a clearer image."
    )

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)
