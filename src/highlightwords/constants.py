#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the highlightwords library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Matching Behavior - Defaults for chunk finding
3. Rendering - Defaults for the HTML and marker renderers
4. CLI and Configuration - Entry point settings
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

OutputFormat = Literal["text", "json", "html", "rich"]

# =============================================================================
# Matching Behavior
# =============================================================================

DEFAULT_CASE_SENSITIVE = False
DEFAULT_AUTO_ESCAPE = False

# =============================================================================
# Rendering
# =============================================================================

DEFAULT_HIGHLIGHT_TAG = "mark"
DEFAULT_ACTIVE_INDEX = -1
DEFAULT_OPEN_MARKER = "<<"
DEFAULT_CLOSE_MARKER = ">>"
DEFAULT_RICH_HIGHLIGHT_STYLE = "bold yellow"
DEFAULT_RICH_ACTIVE_STYLE = "bold black on yellow"

# http, https and ftp URLs embedded in chunk text
URL_PATTERN = re.compile(
    r"(http|ftp|https)://([\w_-]+(?:(?:\.[\w_-]+)+))([\w.,@?^=%&:/~+#-]*[\w@?^=%&/~+#-])"
)

# =============================================================================
# CLI and Configuration
# =============================================================================

DEFAULT_OUTPUT_FORMAT: OutputFormat = "text"
CONFIG_ENV_VAR = "HIGHLIGHTWORDS_CONFIG"
CONFIG_FILENAMES = [".highlightwords.toml", ".highlightwords.yaml", ".highlightwords.yml", ".highlightwords.json"]
PYPROJECT_TOOL_SECTION = "highlightwords"
