"""Exception hierarchy for the generation pipeline."""


class GenerationError(Exception):
    """Base exception for image generation errors."""
    pass


class InvalidOptionsError(GenerationError):
    """Exception raised when generation options fail validation."""
    pass


class EncodingError(GenerationError):
    """Exception raised when a rendered surface cannot be encoded."""
    pass


class MetadataError(GenerationError):
    """Exception raised when EXIF metadata cannot be built or embedded."""
    pass


class ArchiveError(GenerationError):
    """Exception raised when the result archive cannot be built."""
    pass


class SessionBusyError(GenerationError):
    """Exception raised when a run is requested while another is in progress."""
    pass
