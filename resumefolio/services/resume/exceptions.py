class ResumeProcessingError(Exception):
    """Base class for failures while turning an uploaded résumé into fields."""

    pass


class UnsupportedFormatError(ResumeProcessingError):
    pass


class FileTooLargeError(ResumeProcessingError):
    pass


class ExtractionFailedError(ResumeProcessingError):
    pass


class NoJsonFoundError(ResumeProcessingError):
    pass


class MalformedJsonError(ResumeProcessingError):
    pass


class UpstreamError(ResumeProcessingError):
    pass
