# No dependencies
import numpy as np

# Plain-text PPM
MAGIC = "P3"
MAX_CHANNEL = 255

# 255.999 rather than 255 so that 1.0 lands on 255 after truncation
CHANNEL_SCALE = 255.999

pixel_dtype = np.uint8
component_dtype = np.float64
