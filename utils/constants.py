"""Filter constants: channel layout, kernel taps, colour matrices."""

import numpy as np

# Buffers are RGB, as returned by utils.image_io.load_image
RED, GREEN, BLUE = 0, 1, 2

MAX_VALUE = 255

# 1D Gaussian taps; outer products give the 5x5 (sum 100) and 3x3 (sum 16) kernels
GAUSS_5_TAPS = (1, 2, 4, 2, 1)
GAUSS_3_TAPS = (1, 2, 1)

# Sobel: derivative taps and the orthogonal smoothing taps
SOBEL_DERIVATIVE_TAPS = (-1, 0, 1)
SOBEL_SMOOTH_TAPS = (1, 2, 1)

# Rows produce R', G', B' from (R, G, B)
SEPIA_MATRIX = np.array([
    [0.393, 0.769, 0.189],
    [0.349, 0.686, 0.168],
    [0.272, 0.534, 0.131],
], dtype=np.float64)

# Unit vector at 45 degrees
EMBOSS_DIRECTION = (0.7071, 0.7071)
EMBOSS_OFFSET = 128

DEFAULT_QUANTIZE_LEVELS = 10
BRIGHTNESS_STEP = 0.1

DEFAULT_REPEAT = 10
