"""Low-level image operations."""

import cv2
import numpy as np
from pathlib import Path

from .errors import DecodeError, EncodeError


def load_image(file_path) -> np.ndarray:
    """
    Load image from path, keeping its channels and bit depth.

    Raises:
        DecodeError: If the file is missing or cannot be decoded
    """
    file_path = str(file_path)
    if not Path(file_path).is_file():
        raise DecodeError(f"Image not found: {file_path}")

    img = cv2.imread(file_path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise DecodeError(f"Could not load image: {file_path}")
    return img


def has_writer(file_path) -> bool:
    """Check whether OpenCV can encode images with this file's extension."""
    if not Path(str(file_path)).suffix:
        return False
    try:
        return bool(cv2.haveImageWriter(str(file_path)))
    except cv2.error:
        return False


def save_image(file_path, image: np.ndarray) -> None:
    """
    Write image using the codec selected by the file extension.

    Raises:
        EncodeError: If no writer exists for the extension or the write fails
    """
    file_path = str(file_path)
    if not has_writer(file_path):
        raise EncodeError(f"No image writer for format: {file_path}")

    try:
        ok = cv2.imwrite(file_path, image)
    except cv2.error as e:
        raise EncodeError(f"Could not write image: {file_path} ({e})") from e

    if not ok:
        raise EncodeError(f"Could not write image: {file_path}")
