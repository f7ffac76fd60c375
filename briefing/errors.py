"""
Exceptions raised while producing a briefing.

The HTTP layer maps each of these to a status code and a JSON ``error`` field.
"""


class BriefingError(Exception):
    """Base class for briefing failures."""

    status_code = 500


class ConfigurationError(BriefingError):
    """A required setting (usually the Gemini API key) is missing."""

    status_code = 500


class NoContentError(BriefingError):
    """The submitted HTML contained nothing worth summarizing."""

    status_code = 400


class SummarizationError(BriefingError):
    """The call to the model provider failed or returned nothing usable."""

    status_code = 500
