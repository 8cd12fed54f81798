"""Custom exceptions for island transit search."""


class TransitSearchError(Exception):
    """Base exception for transit search errors."""

    pass


class DataLoadError(TransitSearchError):
    """Raised when a static data collection cannot be loaded."""

    pass


class NetworkError(DataLoadError):
    """Raised when there's a network-related error."""

    pass


class DataFormatError(DataLoadError):
    """Raised when a data file is not valid JSON or does not match the model."""

    pass


class StationNotFoundError(TransitSearchError):
    """Raised when a station id cannot be found."""

    pass


class ValidationError(TransitSearchError):
    """Raised when input validation fails."""

    pass
