"""
Analysis Thresholds

Centralized heuristic constants for the stroke pipeline.

The anchor thresholds are pixel-per-frame rates tuned for 30 fps capture.
They do not adapt to framerate or noise level.
"""

import os

# =============================================================================
# Capture
# =============================================================================

CAPTURE_FPS = 30

# =============================================================================
# Metric extraction
# =============================================================================

# Shoulder width (px) that maps to ROTATION_SCALE_DEG of rotation
ROTATION_REFERENCE_WIDTH_PX = 50.0
ROTATION_SCALE_DEG = 45.0

# =============================================================================
# Anchor detection
# =============================================================================

BACKSWING_ONSET_RATE = -2.0       # px/frame; wrist starts dropping
BACKSWING_START_LOOKBACK = 5      # frames before onset
FORWARD_SWING_ONSET_RATE = 2.0    # px/frame; wrist starts rising
FOLLOW_THROUGH_MIN_GAP = 10       # frames after forward swing start
FOLLOW_THROUGH_SETTLE_RATE = 1.0  # px/frame; |change| below this = settled
FOLLOW_THROUGH_TAIL = 5           # frames added after settling / kept at end

# =============================================================================
# Temporal normalization
# =============================================================================

PERCENT_STEP = 2
PERCENT_POINTS = tuple(range(0, 101, PERCENT_STEP))   # 0, 2, ..., 100

# =============================================================================
# Recommendation rules
# =============================================================================

# Shoulder rotation: peak_rotation.difference (degrees)
ROTATION_HIGH_BELOW = -15.0
ROTATION_MEDIUM_BELOW = -8.0
ROTATION_STRENGTH_ABOVE = -5.0

# Wrist position: wrist_drop.difference (pixels)
WRIST_HIGH_ABOVE = 20.0
WRIST_MEDIUM_ABOVE = 10.0

# Weight transfer: trainee range as a fraction of pro range
WEIGHT_HIGH_RATIO = 0.6
WEIGHT_MEDIUM_RATIO = 0.8

# Arm extension: peak_extension.difference (pixels)
EXTENSION_HIGH_BELOW = -25.0
EXTENSION_MEDIUM_BELOW = -15.0

# Stroke tempo: stroke_duration.difference (milliseconds)
TEMPO_SLOW_ABOVE_MS = 300.0
TEMPO_STRENGTH_BELOW_MS = 100.0

# Component score awarded by each rule outcome
SCORES = {
    "shoulder_rotation": {"high": 60, "medium": 75, "strength": 95, "neutral": 85},
    "wrist_position": {"high": 65, "medium": 80, "strength": 90},
    "weight_transfer": {"high": 60, "medium": 75, "strength": 90},
    "arm_extension": {"high": 65, "medium": 80, "strength": 95},
    "stroke_tempo": {"medium": 70, "strength": 95, "neutral": 85},
}

MAX_DRILLS = 3

# =============================================================================
# Runtime settings
# =============================================================================

PRO_DATA_ENV = "PICKLECOACH_PRO_DATA"


def pro_data_path() -> str:
    """Location of the reference recording, overridable from the environment."""
    default = os.path.join(os.path.dirname(__file__), "data", "pro_backhand_drive.json")
    return os.environ.get(PRO_DATA_ENV, default)
