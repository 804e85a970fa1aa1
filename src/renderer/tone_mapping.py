# renderer/tone_mapping.py
import numpy as np
from numba import njit

def gamma_correct(accumulated, samples_per_pixel):
    """
    Average the accumulated samples and apply gamma 2 (square root).
    """
    averaged = np.asarray(accumulated, dtype=np.float64) / samples_per_pixel
    return np.sqrt(np.maximum(averaged, 0.0))

@njit
def quantize_kernel(linear_image, output_image):
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = min(max(linear_image[y, x, c], 0.0), 0.999)
                output_image[y, x, c] = int(256.0 * value)

def quantize(linear_image):
    """
    Map [0, 1] values to 8-bit integers, clamping out-of-range radiance.
    """
    linear_image = np.ascontiguousarray(linear_image, dtype=np.float64)
    output = np.zeros(linear_image.shape, dtype=np.uint8)
    quantize_kernel(linear_image, output)
    return output

def to_display(accumulated, samples_per_pixel):
    return quantize(gamma_correct(accumulated, samples_per_pixel))
