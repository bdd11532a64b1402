
import math

import pandas as pd
from idwpy import IDW, idw_from_frame, interpolate_frame, power_sweep

# 1D
idw = IDW([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])
print(idw.evaluate(1.5))

# Custom power and weight transform
tuned = (
    idw.with_power(0.5)
    .with_weight_transform(lambda w: (1.0 + math.sin(4.0 * math.pi * w)) * 0.5)
)
print(tuned.evaluate(1.5))

# 2D samples from a table
stations = pd.DataFrame({
    "longitude": [-99.1, -99.3, -98.9, -99.0],
    "latitude": [19.5, 19.3, 19.6, 19.2],
    "tmin": [8.0, 7.1, 9.4, 6.8],
})
idw2 = idw_from_frame(stations, coord_cols=["longitude", "latitude"], value_col="tmin")
grid = pd.DataFrame({"longitude": [-99.05, -99.2], "latitude": [19.4, 19.45]})
print(interpolate_frame(idw2, grid, coord_cols=["longitude", "latitude"], out_col="tmin"))

# Which power fits these stations best?
print(power_sweep(idw2.points, idw2.values, [0.5, 1.0, 2.0, 3.0]))
