"""Default configuration values and paths."""

import os
from pathlib import Path
from typing import Final

# Default directories
DEFAULT_CONFIG_DIR: Final[Path] = Path.home() / ".config" / "fuzzy-index"

# Default file paths
DEFAULT_CONFIG_FILE: Final[Path] = DEFAULT_CONFIG_DIR / "config.toml"

# Environment variable names
ENV_CONFIG_PATH: Final[str] = "FUZZY_INDEX_CONFIG"
ENV_LOG_LEVEL: Final[str] = "FUZZY_INDEX_LOG_LEVEL"
ENV_THRESHOLD: Final[str] = "FUZZY_INDEX_THRESHOLD"
ENV_OUTPUT_FORMAT: Final[str] = "FUZZY_INDEX_FORMAT"

# Default config content (TOML)
DEFAULT_CONFIG_TOML: Final[str] = """\
# fuzzy-index configuration

[search]
threshold = 0.35
return_excluded = false
exact_match_score = 0.001
full_exact_match_score = 0.0
space_characters = [" "]
# multiplier_for_match_close_to_start = 0.5
# multiplier_for_match_after_space = 0.5
# multiplier_for_matches_in_order = 0.1

[output]
default_format = "rich"
color = true
limit = 20

[logging]
level = "WARNING"
json_format = false
"""


def get_config_path() -> Path:
    """Get the configuration file path."""
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_FILE
