"""
Image export for generated rasters.

Pixel buffers are encoded with Pillow. The output file is opened inside a
``with`` block so the handle is released on every path; if encoding fails the
partially written file is removed.
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np
import structlog
from PIL import Image

from ..core.classifier import to_channel
from ..errors import EncodingError, OutputCreationError

logger = structlog.get_logger()

PathLike = Union[str, Path]


def _check_target(path: Path) -> None:
    if path.is_dir():
        raise OutputCreationError(path, "is a directory")
    if not path.parent.is_dir():
        raise OutputCreationError(path, f"directory {path.parent} does not exist")


def _format_for(path: Path, image_format: Optional[str]) -> str:
    if image_format:
        return image_format.upper()
    extensions = Image.registered_extensions()
    image_format = extensions.get(path.suffix.lower())
    if image_format is None:
        raise EncodingError(path, f"unsupported image extension '{path.suffix}'")
    return image_format


def _write(image: Image.Image, path: Path, image_format: str) -> None:
    try:
        handle = open(path, "wb")
    except OSError as e:
        raise OutputCreationError(path, e.strerror or str(e)) from e

    try:
        with handle:
            image.save(handle, format=image_format)
    except (OSError, ValueError, KeyError) as e:
        path.unlink(missing_ok=True)
        raise EncodingError(path, str(e)) from e


def export_image(pixels: np.ndarray, path: PathLike, image_format: Optional[str] = None) -> Path:
    """
    Write an RGBA pixel buffer to an image file.

    Args:
        pixels: uint8 array of shape (height, width, 4)
        path: Destination file; the format follows its extension
        image_format: Explicit Pillow format name, overrides the extension

    Returns:
        The destination path

    Raises:
        OutputCreationError: the file could not be opened for writing
        EncodingError: the buffer could not be encoded
    """
    path = Path(path)
    _check_target(path)
    pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] != 4 or pixels.dtype != np.uint8:
        raise EncodingError(
            path, f"expected uint8 RGBA buffer, got {pixels.dtype} array of shape {pixels.shape}"
        )

    image_format = _format_for(path, image_format)
    image = Image.fromarray(np.ascontiguousarray(pixels))
    _write(image, path, image_format)

    logger.info(
        "Image exported",
        path=str(path),
        format=image_format,
        width=pixels.shape[1],
        height=pixels.shape[0],
    )
    return path


def export_heights(heights: np.ndarray, path: PathLike, image_format: Optional[str] = None) -> Path:
    """
    Write a composed height field as an 8-bit greyscale image.

    Heights are scaled by 255, truncated and clamped to [0, 255].
    """
    path = Path(path)
    _check_target(path)
    heights = np.asarray(heights, dtype=np.float64)
    if heights.ndim != 2:
        raise EncodingError(path, f"expected a 2D height array, got shape {heights.shape}")

    image_format = _format_for(path, image_format)
    grey = to_channel(heights * 255).astype(np.uint8)
    image = Image.fromarray(grey)
    _write(image, path, image_format)

    logger.info("Height field exported", path=str(path), format=image_format)
    return path
