"""Custom exceptions for the :mod:`flowtag` package."""


class FlowTagError(Exception):
    """Base class for all custom ``flowtag`` exceptions.

    Parameters
    ----------
    message:
        Short description of the failure.
    context:
        Optional additional information about where/why the error occurred.
    suggestion:
        Optional hint that may help recover from the error.
    """

    def __init__(
        self,
        message: str = "",
        *,
        context: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.context = context
        self.suggestion = suggestion


class TableLoadError(FlowTagError):
    """Raised when a reference table cannot be opened or read."""


class LookupTableError(TableLoadError):
    """Raised when the ``dstport,protocol,tag`` lookup table cannot be read."""


class ProtocolMapError(TableLoadError):
    """Raised when the protocol number map cannot be read."""


class FlowLogReadError(FlowTagError):
    """Raised when the flow log file cannot be opened or read."""


class DispatchTimeoutError(FlowTagError):
    """Raised when workers do not finish within the dispatch timeout."""


class AggregationError(FlowTagError):
    """Raised when a worker fails unexpectedly while classifying a line."""


class ReportGenerationError(FlowTagError):
    """Raised when the text report or a tabular export cannot be written."""
