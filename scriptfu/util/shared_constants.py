"""Assorted constants required in multiple areas."""
import os.path

from platformdirs import user_data_dir, user_log_dir

PACKAGE_DIR = os.path.dirname(os.path.dirname(__file__))
RESOURCE_DIR = f'{PACKAGE_DIR}/resources'
DATA_DIR = user_data_dir('ScriptFu', 'scriptfu')
LOG_DIR = user_log_dir('ScriptFu', 'scriptfu')
for app_dir in [DATA_DIR, LOG_DIR]:
    if not os.path.isdir(app_dir):
        os.makedirs(app_dir)

# Numeric:
INT_MIN = -2147483648
INT_MAX = 2147483647
# The full range of a host double parameter:
FLOAT_MIN = -1.7976931348623157e308
FLOAT_MAX = 1.7976931348623157e308

# Digits after the decimal point in rendered float tokens:
DEFAULT_FLOAT_PRECISION = 6

# Menu label prefix for scripts that should not be added to any menu:
NO_MENU_LABEL = '<None>'

# Identifier written for identity arguments that don't reference anything:
NO_ITEM_ID = -1
