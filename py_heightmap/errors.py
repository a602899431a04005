"""Exception types raised by the heightmap generator."""


class HeightmapError(Exception):
    """Base class for all generator errors."""


class InvalidGridError(HeightmapError, ValueError):
    """Grid dimensions are not positive integers."""


class InvalidOctaveSpecError(HeightmapError, ValueError):
    """Octave list is empty or contains an unusable frequency/weight."""


class UnknownPresetError(HeightmapError, KeyError):
    """No octave preset is registered under the requested name."""


class OutputCreationError(HeightmapError):
    """The destination path could not be opened for writing."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot create output file {path}: {reason}")


class EncodingError(HeightmapError):
    """The pixel buffer could not be serialized to the target format."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to encode image {path}: {reason}")
