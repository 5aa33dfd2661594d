"""Exception hierarchy for Hatchplot."""

from typing import Any


class HatchplotError(Exception):
    """Base exception for all Hatchplot errors."""

    pass


class InvalidParameterError(HatchplotError, ValueError):
    """A numeric parameter is out of range or not finite."""

    def __init__(self, parameter: str, value: Any, reason: str) -> None:
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for '{parameter}' ({value!r}): {reason}")


class ImageError(HatchplotError):
    """Errors related to source images."""

    pass


class ImageLoadError(ImageError):
    """Error loading or decoding an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class SvgParseError(HatchplotError):
    """The SVG document is not well-formed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not parse SVG document: {reason}")


class OutputWriteError(HatchplotError):
    """Error writing an output artifact."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")
