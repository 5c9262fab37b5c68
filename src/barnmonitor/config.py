"""
Configuration & Global Constants
================================
Central registry for the constants shared by the model and the views.

Why is this file needed?
------------------------
1. Abstraction: thresholds and slider ranges are defined once instead of being
   hardcoded in every widget.
2. Consistency: the card colors, the heat-map gradient and the chart legend
   all classify ammonia with the same limits.

Exports:
    HEALTHY_LIMIT_PPM, CRITICAL_LIMIT_PPM: Ammonia status band limits.
    HEATMAP_GRID, HEATMAP_SPACING: Heat-map lattice definition.
    *_RANGE / *_DEFAULT: Slider ranges and initial values.
"""
from typing import Final

# Application identity
ORG_ID: Final = "barnmonitor"
APP_ID: Final = "barn-monitor"
VISIBLE_APP_NAME: Final = "Barn Monitor"

# Ammonia status bands (ppm)
HEALTHY_LIMIT_PPM: Final = 20.0
CRITICAL_LIMIT_PPM: Final = 50.0
# Above CRITICAL_LIMIT_PPM the gradient reaches pure red after this many ppm
SATURATION_SPAN_PPM: Final = 50.0

# Heat-map lattice (gx, gy, gz); Y is vertical
HEATMAP_GRID: Final = (5, 3, 5)
HEATMAP_SPACING: Final = 2.0
HEATMAP_Y_OFFSET: Final = 1.0
JITTER_RANGE: Final = (0.7, 1.3)

# Heat-map rendering
ZONE_RADIUS: Final = 0.4
ZONE_OPACITY: Final = 0.6
PULSE_SCALE: Final = 1.2
PULSE_HALF_PERIOD_S: Final = 1.5
PULSE_INTERVAL_MS: Final = 50

# Ammonia tab sliders
VENT_DOWN_TEMP_RANGE: Final = (0.0, 40.0)
VENT_DOWN_TEMP_DEFAULT: Final = 22.25
BEDDING_HEIGHT_RANGE: Final = (0.0, 100.0)
BEDDING_HEIGHT_DEFAULT: Final = 0.0
AMMONIA_LEVEL_RANGE: Final = (0.0, 50.0)
AMMONIA_LEVEL_DEFAULT: Final = 8.0

# Add barn dialog
TARGET_TEMP_RANGE: Final = (15, 35)
TARGET_TEMP_DEFAULT: Final = 25
NEW_BARN_HUMIDITY: Final = 50
NEW_BARN_AMMONIA_PPM: Final = 5
