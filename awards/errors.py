"""Exceptions raised while parsing award search responses."""


class ParseError(Exception):
    """Error while parsing an award search response."""

    def __init__(self, message: str, error_type: str = "UNKNOWN") -> None:
        super().__init__(message)
        self.error_type = error_type


class StructuralParseError(ParseError):
    """The response cannot be parsed at all. Aborts the whole response."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_type="STRUCTURE")


class SegmentResolutionError(ParseError):
    """A leg of one flight could not be resolved. Only that flight is skipped."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_type="SEGMENT")


class FareResolutionError(ParseError):
    """A flight's fare tag has no catalog entry. Only that flight is skipped."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_type="FARE")


class CatalogError(Exception):
    """Reference catalog could not be loaded."""
