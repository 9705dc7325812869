#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2jira.

This module centralizes the JIRA markup vocabulary, default configuration
values and dependency specifications used across the package.

Constants are organized by category:
1. JIRA Markup - Literal markers emitted by the renderer
2. Rendering Defaults - Default values for renderer options
3. Parsing Defaults - Default values for parser options
4. Dependency Specifications - Used by the requires_dependencies decorator
5. Configuration - Config file names and environment prefixes
"""

from __future__ import annotations

# =============================================================================
# JIRA Markup
# =============================================================================

JIRA_QUOTE = "{quote}"
JIRA_CODE_BLOCK = "{code}"
JIRA_CODE_BLOCK_WITH_LANGUAGE = "{{code:{language}}}"
JIRA_INLINE_CODE_OPEN = "{{"
JIRA_INLINE_CODE_CLOSE = "}}"
JIRA_EMPHASIS = "_"
JIRA_STRONG = "*"
JIRA_HEADING = "h{level}. "
JIRA_IMAGE = "!{destination}!"
JIRA_LINK_OPEN = "["
JIRA_LINK_CLOSE = "|{destination}]"
JIRA_ORDERED_BULLET = "#"
JIRA_UNORDERED_BULLET = "*"

# Four dashes, not three
JIRA_RULE = "----"

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_FOOTNOTE_START_INDEX = 0
DEFAULT_FOOTNOTE_REFERENCE_FORMAT = "[{index}]"
DEFAULT_FOOTNOTE_DEFINITION_FORMAT = "[{index}] "

# =============================================================================
# Parsing Defaults
# =============================================================================

DEFAULT_PARSE_FOOTNOTES = False
DEFAULT_PARSE_TABLES = False
DEFAULT_MAX_NESTING_LEVEL = 6

# =============================================================================
# Dependency Specifications for @requires_dependencies decorator
# =============================================================================
# Each spec is a list of tuples: (pip_package, import_name, version_constraint)

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

# =============================================================================
# Configuration
# =============================================================================

ENV_PREFIX = "MD2JIRA_"
CONFIG_ENV_VAR = "MD2JIRA_CONFIG"
CONFIG_FILENAMES = [".md2jira.toml", ".md2jira.yaml", ".md2jira.yml", ".md2jira.json"]
PYPROJECT_SECTION = "md2jira"
