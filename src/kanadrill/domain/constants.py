"""Centralized constants for kana-drill.

All magic values and defaults live here so every layer
imports from a single source of truth.
"""

# ---------- Sets ----------
DEFAULT_SETS = "hiragana"
SET_SEPARATOR = ","

# ---------- Vocabulary assets ----------
ASSET_PACKAGE = "kanadrill"
ASSET_DIR_NAME = "assets"
RECORD_SEPARATOR = ","
RECORD_COLUMNS = 2

# ---------- Sampler ----------
INITIAL_WEIGHT = 1
WEIGHT_STEP = 1

# ---------- Interactive prompt ----------
COMMAND_PREFIX = "\\"
PROMPT_MARKER = "|> "
