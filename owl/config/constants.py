"""
Option names, defaults and config file locations.
"""

# Command line option syntax: +Name:Value
OPTION_START = "+"
OPTION_DELIMITER = ":"

# Recognised option names (case-sensitive)
OPT_CONF = "Conf"
OPT_HOST = "Host"
OPT_PORT = "Port"
OPT_NAME = "Name"
OPT_HEARTBEAT = "Heartbeat"
OPT_LOG = "Log"

# Config file section holding the options
SECTION_WATCH = "watch"

# Probed in order when no Conf option is given
CONF_LOCATION_CWD = "owl.yaml"
CONF_LOCATION_ETC_OWL = "/etc/owl/owl.yaml"
CONF_LOCATION_ETC = "/etc/owl.yaml"
DEFAULT_CONF_LOCATIONS = (CONF_LOCATION_CWD, CONF_LOCATION_ETC_OWL, CONF_LOCATION_ETC)

# Maximum config file size (10MB)
MAX_CONFIG_SIZE_BYTES = 10 * 1024 * 1024

# Telemetry defaults
DEFAULT_REMOTE_HOST = "0.0.0.0"
DEFAULT_REMOTE_PORT = 39576
DEFAULT_HEARTBEAT_MILLIS = 1000

# Upper bound for heartbeat intervals (about 24.8 days), below threading.TIMEOUT_MAX
MAX_HEARTBEAT_MILLIS = 2**31 - 1

DEFAULT_LOG_LEVEL = "warning"
