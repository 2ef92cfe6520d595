"""
SerialTerm - Configuration Module
Line-parameter choices, fixed timings and window settings.
"""

APP_NAME = "SerialTerm"
VERSION = "v0.7"

# ================= LINE PARAMETERS =================
BAUD_RATES = (9600, 19200, 38400, 57600, 115200)
DEFAULT_BAUD_RATE = 9600

DATA_BITS = (5, 6, 7, 8)
DEFAULT_DATA_BITS = 8

PARITIES = ("N", "O", "E")
PARITY_NAMES = {"N": "None", "O": "Odd", "E": "Even"}
DEFAULT_PARITY = "N"

STOP_BITS = (1, 2)
DEFAULT_STOP_BITS = 1

# ================= TIMING =================
READ_TIMEOUT_MS = 10
LISTENER_INTERVAL_MS = 10
RECV_BUFFER_SIZE = 16       # bytes per single-shot receive

# ================= WINDOW =================
WINDOW_SIZE = (500, 500)
MIN_WINDOW_SIZE = (500, 500)
DEFAULT_THEME = "Catppuccin Frappé"

# ================= LOGGING =================
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
