"""Constants used throughout choicemenu."""

# Choice labels shown when the menu starts
DEFAULT_CHOICES = ("Choice 1", "Choice 2", "Choice 3")

# Poll timeout bounds for the interaction loop (in milliseconds)
DEFAULT_POLL_TIMEOUT_MS = 250
MIN_POLL_TIMEOUT_MS = 200
MAX_POLL_TIMEOUT_MS = 500

# How long a lone ESC waits for the rest of an escape sequence (in seconds)
ESCAPE_SEQUENCE_DELAY = 0.05

# Bytes read from stdin per poll
READ_CHUNK_SIZE = 64

# Layout ratios for the three screen regions (60% / 20% / 20%)
CHOICES_RATIO = 3
SELECTED_RATIO = 1
MESSAGE_RATIO = 1

# Styles
HIGHLIGHT_STYLE = "yellow"
BORDER_STYLE = "cyan"

# Exit codes
EXIT_OK = 0
EXIT_TERMINAL_ERROR = 1
EXIT_INTERRUPTED = 130
