"""
Image output utilities for the rendering step.

    • ensure_output_dir(path)
    • save_image(path, image)
"""

import os

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  FOLDERS
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """Create path (and parents) unless it is empty or already there."""
    if path and not os.path.isdir(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  PNG OUTPUT
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray) -> bool:
    """
    Writes a BGR image, creating its folder first.
    Returns False when OpenCV could not encode or write the file.
    """
    ensure_output_dir(os.path.dirname(path))
    return bool(cv2.imwrite(path, image))
