#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the html2jsx library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Conversion Defaults - option defaults
3. Markup Constants - tag names and patterns the converter special-cases
4. Configuration Files - config discovery names
5. CLI Exit Codes
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ParserBackend = Literal["html.parser", "lxml", "html5lib"]

# =============================================================================
# Conversion Defaults
# =============================================================================

DEFAULT_INDENT = "  "
DEFAULT_PARSER: ParserBackend = "html.parser"

SUPPORTED_PARSERS: tuple[str, ...] = ("html.parser", "lxml", "html5lib")

# Distribution that provides each optional parser backend
PARSER_PACKAGES: dict[str, str] = {
    "lxml": "lxml",
    "html5lib": "html5lib",
}

# Number of indentation units a class-body nests generated markup at. The
# converter emits at this depth and strips it again when post-processing.
CLASS_BODY_INDENT_LEVELS = 3

# =============================================================================
# Markup Constants
# =============================================================================

# Tag of the synthetic container the fragment is parsed into
CONTAINER_TAG = "div"

# Elements whose text children are redirected into attributes
TEXTAREA_TAG = "textarea"
STYLE_TAG = "style"
PRE_TAG = "pre"
ATTRIBUTE_CONTENT_TAGS = frozenset({TEXTAREA_TAG, STYLE_TAG})

# A single newline directly after these start tags is dropped by HTML parsers
LEADING_NEWLINE_TAGS = frozenset({"pre", "listing", "textarea"})

# Elements whose content browsers parse as text only
RAW_TEXT_TAGS = frozenset({"textarea", "title", "style", "xmp"})

STYLE_ATTRIBUTE = "style"
ALT_ATTRIBUTE = "alt"

SCRIPT_BLOCK_PATTERN = re.compile(r"<script([\s\S]*?)</script>", re.IGNORECASE)

# Whitespace and braces that must survive JSX whitespace coalescing inside <pre>
PRE_PRESERVED_PATTERN = re.compile(r"( {2,}|\n|\t|\{|\})")
BRACE_PATTERN = re.compile(r"(\{|\})")
NEWLINE_INDENT_PATTERN = re.compile(r"\n\s*")

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_ENV_VAR = "HTML2JSX_CONFIG"
CONFIG_FILENAMES: tuple[str, ...] = (".html2jsx.toml", ".html2jsx.yaml", ".html2jsx.yml", ".html2jsx.json")
PYPROJECT_TOOL_SECTION = "html2jsx"

# =============================================================================
# CLI Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
