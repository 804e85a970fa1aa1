# renderer/image_output.py
import os
from typing import TextIO
import numpy as np
from PIL import Image

def write_ppm(image: np.ndarray, stream: TextIO) -> None:
    """
    Write a (height, width, 3) uint8 image as plain-text PPM (P3).
    Rows are written top to bottom, pixels left to right.
    """
    height, width = image.shape[:2]
    stream.write("P3\n")
    stream.write(f"{width} {height}\n")
    stream.write("255\n")
    for row in image:
        for r, g, b in row:
            stream.write(f"{int(r)} {int(g)} {int(b)}\n")

def save_image(image: np.ndarray, path) -> None:
    """
    Save an image. '.ppm' files use the plain-text format, anything else
    is handed to Pillow, which picks the encoder from the extension.
    """
    extension = os.path.splitext(str(path))[1].lower()
    if extension == ".ppm":
        with open(path, "w") as f:
            write_ppm(image, f)
    else:
        Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path)
