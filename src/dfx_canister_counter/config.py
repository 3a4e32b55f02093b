"""Fixed names used by the counter."""

DEFAULT_CONFIG_NAME = "dfx.json"
DEFAULT_PROJECT_DIR = "."

CANISTERS_KEY = "canisters"
TYPE_KEY = "type"
UNSPECIFIED_TYPE = "unspecified"  # canisters with no "type" field

# Environment overrides read by the CLI
ENV_PATH = "DFX_COUNTER_PATH"
ENV_LOG_LEVEL = "DFX_COUNTER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
