"""Image I/O using OpenCV. Buffers are RGB in memory, BGR on disk."""

import os

import cv2
import numpy as np

from models.image_buffer import ImageBuffer


def load_image(path: str) -> np.ndarray:
    """Load image as RGB uint8."""
    img = cv2.imread(path)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def save_image(image: np.ndarray, path: str) -> None:
    """Save an RGB or single-channel uint8 image."""
    if image.ndim == 3 and image.shape[2] == 3:
        image = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
    if not cv2.imwrite(path, image):
        raise ValueError(f"Could not write image to {path}")


def load_buffer(path: str) -> ImageBuffer:
    return ImageBuffer(load_image(path))


def save_buffer(buffer: ImageBuffer, path: str) -> str:
    """Write a buffer, creating the parent directory. Returns the path."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    save_image(buffer.to_array(), path)
    return path
