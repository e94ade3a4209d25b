"""Raster intake: validate decoded image buffers and binarize them."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from PIL import Image

# Channel counts we accept on a (H, W, C) buffer: gray, RGB, RGBA.
_VALID_CHANNELS = (1, 3, 4)


class InvalidRasterError(ValueError):
    """Raised when a raster buffer cannot be interpreted as an image."""


def load_raster(raster: object) -> NDArray:
    """Return ``raster`` as a (H, W) or (H, W, C) numeric numpy array.

    Pillow images are converted to RGBA. Boolean masks (True = foreground)
    and float images in [0, 1] are mapped onto the 8-bit scale so the
    binarization threshold applies uniformly. Zero-sized arrays are valid.
    """
    if raster is None:
        raise InvalidRasterError("raster is None")

    if isinstance(raster, Image.Image):
        return np.array(raster.convert("RGBA"))

    arr = np.asarray(raster)
    if arr.dtype.kind not in "buif":
        raise InvalidRasterError(f"unsupported raster dtype: {arr.dtype}")
    if arr.ndim not in (2, 3):
        raise InvalidRasterError(f"raster must be 2-D or 3-D, got {arr.ndim}-D")
    if arr.ndim == 3 and arr.shape[2] not in _VALID_CHANNELS:
        raise InvalidRasterError(f"unsupported channel count: {arr.shape[2]}")

    if arr.dtype.kind == "b":
        return np.where(arr, 0, 255).astype(np.uint8)
    if arr.dtype.kind == "f":
        return _float_to_uint8(arr)
    return arr


def _float_to_uint8(arr: NDArray) -> NDArray[np.uint8]:
    if arr.size and not np.isfinite(arr).all():
        raise InvalidRasterError("float raster contains NaN or infinity")
    if arr.size and (arr.min() < 0.0 or arr.max() > 1.0):
        raise InvalidRasterError(
            f"float raster values must lie in [0, 1], got [{arr.min()}, {arr.max()}]"
        )
    return np.rint(arr * 255).astype(np.uint8)


def binarize(raster: NDArray, threshold: int = 127) -> NDArray[np.bool_]:
    """Foreground mask: red channel strictly below ``threshold``.

    2-D rasters are their own red channel.
    """
    red = raster if raster.ndim == 2 else raster[:, :, 0]
    return np.asarray(red < threshold, dtype=np.bool_)
