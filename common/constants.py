# Config key for the default appear/disappear timeout (milliseconds)
WAITING_APPEAR_TIMEOUT = "waiting_appear_timeout"
DEFAULT_WAITING_APPEAR_TIMEOUT = 8000

# Delay between checks of polled wait conditions (milliseconds)
POLLING_INTERVAL = 100

# Tags whose visible content is their value, not their text
EDITABLE_TAGS = ("input", "textarea")
