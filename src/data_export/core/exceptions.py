class ExportContextError(Exception):
    """Base exception for data_export failures."""


class ConfigurationError(ExportContextError):
    """Raised when the YAML configuration is invalid."""


class SegmenterNotAttachedError(ExportContextError):
    """Raised when a file name is requested before any segmenter is attached."""


class ContextClosedError(ExportContextError):
    """Raised when a closed execution context is asked to own a segmenter."""


class InvalidSegmentIndexError(ExportContextError):
    """Raised when a segmenter reports a file index that cannot be formatted."""


class InvalidIncrementError(ExportContextError, ValueError):
    """Raised when the success counter would be decremented."""


class SegmenterReleaseError(ExportContextError):
    """
    Raised when a released segmenter fails during its own teardown.

    The replacement segmenter is already owned by the context when this is
    raised; ``segmenter`` holds the instance whose teardown failed.
    """

    def __init__(self, message: str, segmenter=None):
        super().__init__(message)
        self.segmenter = segmenter


class ExportPipelineError(ExportContextError):
    """Raised when a provider fails while exporting a segment."""


class SegmenterAlreadyReleasedError(ExportContextError):
    """Raised when a segmenter the context already released is attached again."""
