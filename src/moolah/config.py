"""
Central configuration for Moolah.

Path resolution lives in moolah.workspace.Workspace. Values here are fixed
constants shared by the parser, the model and the CLI.
"""

# Dates are typed as ddMMyyyy (e.g. 01022022 for 1 Feb 2022)
DATE_INPUT_PATTERN = "%d%m%Y"
DATE_OUTPUT_PATTERN = "%d %b %Y"

MIN_AMOUNT = 0
MAX_AMOUNT = 10_000_000

# Characters never allowed in a category or an amount
SPECIAL_SYMBOLS = "!@#$%&*()_+=|<>?{}[]~-"

DATA_ENV_VAR = "MOOLAH_DATA"
LOG_LEVEL_ENV_VAR = "MOOLAH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

PURGE_CONFIRMATION = "Y"
