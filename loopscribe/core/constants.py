"""Global constants for loopscribe."""

# Input limits
MAX_DURATION = 8.0  # seconds
SUPPORTED_FORMATS = {".wav", ".mp3", ".flac", ".ogg", ".aiff", ".aif"}

# Tempo estimation
DEFAULT_TEMPO = 120.0
DEFAULT_FRAME_LENGTH = 2048
DEFAULT_HOP_LENGTH = 512
PEAK_THRESHOLD_RATIO = 0.3
MIN_TEMPO_PEAKS = 4
MIN_ONSET_INTERVAL = 0.15  # seconds
MAX_ONSET_INTERVAL = 2.0  # seconds
TEMPO_RANGE = (75.0, 160.0)

# Step grid
STEPS_PER_BEAT = 8  # 32nd notes
BEATS_PER_BAR = 4
MIN_BEATS = 2
MAX_BEATS = 16

# Band filters (Hz)
LOW_CUTOFF = 150.0
MID_CENTER = 400.0
HIGH_CUTOFF = 5000.0
FILTER_Q = 1.0

# Notation tokens
REST_TOKEN = "~"

# General MIDI percussion map
KICK_NOTE = 36
SNARE_NOTE = 38
HIHAT_NOTE = 42
