"""
constants.py: Centralized configuration for the simulation and the client.
"""

# -------- Scaling --------
REFERENCE_HEIGHT = 600          # Playfield height at which scale factor is 1.0

# -------- Bird Config (unscaled) --------
BIRD_X = 100                    # Fixed bird X position
BIRD_START_Y = 150
BIRD_RADIUS = 15
GRAVITY = 0.35                  # Per-tick acceleration, scale invariant
LIFT = -6.0                     # Velocity set by a flap, scale invariant

# Rotation is purely visual (radians)
NOSE_UP_ROTATION = -0.3
NOSE_DOWN_FACTOR = 0.1
MAX_NOSE_DOWN_ROTATION = 0.7
NOSE_DOWN_THRESHOLD = 1.0       # Velocity above which the bird tilts down

# -------- Pipe Config (unscaled) --------
PIPE_WIDTH = 60
PIPE_GAP = 160
PIPE_SPAWN_DISTANCE = 300       # Horizontal distance between pipe spawns
PIPE_MARGIN = 50                # Minimum distance of a gap from the edges
BASE_GAME_SPEED = 3.0           # Pipe scroll per tick before scaling

NARROW_GAP_LEVEL = 3
NARROW_GAP_CHANCE = 0.25
NARROW_GAP_RATIO = 0.8
MOVING_PIPE_LEVEL = 2
MOVING_PIPE_CHANCE = 0.3

# -------- Progression --------
POINTS_PER_LEVEL = 10
SPEED_PER_LEVEL = 0.5

# -------- Cloud Config (unscaled) --------
CLOUD_COUNT = 5
CLOUD_RESPAWN_OFFSET = 100      # Recycled clouds reappear this far off-screen
CLOUD_HEIGHT_RATIO = 0.6        # Clouds live in the top part of the sky
CLOUD_MIN_RADIUS = 20
CLOUD_RADIUS_RANGE = 20
CLOUD_MIN_SPEED = 0.2
CLOUD_SPEED_RANGE = 0.5

# -------- Client Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 720
RENDER_FPS = 60                 # One simulation tick per rendered frame
DB_FILE = "skyflap_scores.db"

# -------- Audio Config --------
AUDIO_SAMPLE_RATE = 44100
AUDIO_CUE_DURATION = 0.3        # seconds
