"""Provides access to the user-editable script argument engine config."""
from typing import Optional

from scriptfu.config.config import Config
from scriptfu.util.shared_constants import DATA_DIR, RESOURCE_DIR
from scriptfu.util.singleton import Singleton

DEFAULT_CONFIG_PATH = f'{DATA_DIR}/script_fu_config.json'
CONFIG_DEFINITIONS = f'{RESOURCE_DIR}/config/script_fu_config_definitions.json'


class ScriptFuConfig(Config, metaclass=Singleton):
    """Provides access to the user-editable script argument engine config."""

    def __init__(self, json_path: Optional[str] = DEFAULT_CONFIG_PATH) -> None:
        """Load existing config, or initialize from defaults.

        Parameters
        ----------
        json_path: str, optional
            Path where config values will be saved and read. If the file does not exist, it will be created with
            default values. If None, values are never read from or written to disk.
        """
        super().__init__(CONFIG_DEFINITIONS, json_path, ScriptFuConfig)

    # DYNAMIC PROPERTIES:
    COMMAND_FLOAT_PRECISION: str
    LOG_COMMANDS: str
    MAX_HISTORY: str
    RESET_IDS_ON_RESET: str
