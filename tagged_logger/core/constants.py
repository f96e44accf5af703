"""Module-level constants for tagged-logger.

All constants are declared with Final type annotation for immutability
and IDE support.
"""
from __future__ import annotations

import re
from typing import Final

# =============================================================================
# Section 1: Module Exports
# =============================================================================
__all__ = [
    # Formatting
    'TAG_TEMPLATE',
    'COLOR_MARKUP_TEMPLATE',
    'COLOR_MARKUP_PATTERN',
    # Color encoding
    'CHANNEL_MAX',
    'HEX_COLOR_PATTERN',
    # Environment
    'ENV_PREFIX',
    'DEVELOPMENT_ENVIRONMENTS',
    # Logfire
    'DEFAULT_SERVICE_NAME',
    'DEFAULT_COMPONENT',
]

# =============================================================================
# Section 2: Formatting Constants
# =============================================================================
TAG_TEMPLATE: Final[str] = '[{name}] {message}'
COLOR_MARKUP_TEMPLATE: Final[str] = '<color=#{hex_color}>{message}</color>'
# Matches the inline markup produced by COLOR_MARKUP_TEMPLATE
COLOR_MARKUP_PATTERN: Final[re.Pattern[str]] = re.compile(
    r'<color=#(?P<hex>[0-9A-Fa-f]{6}(?:[0-9A-Fa-f]{2})?)>(?P<body>.*?)</color>',
    re.DOTALL,
)

# =============================================================================
# Section 3: Color Encoding Constants
# =============================================================================
CHANNEL_MAX: Final[int] = 255
HEX_COLOR_PATTERN: Final[re.Pattern[str]] = re.compile(r'^#?(?P<hex>[0-9A-Fa-f]{6}(?:[0-9A-Fa-f]{2})?)$')

# =============================================================================
# Section 4: Environment Constants
# =============================================================================
ENV_PREFIX: Final[str] = 'TAGGED_LOGGER_'
DEVELOPMENT_ENVIRONMENTS: Final[frozenset[str]] = frozenset({'development', 'dev', 'local', 'editor'})

# =============================================================================
# Section 5: Logfire Constants
# =============================================================================
DEFAULT_SERVICE_NAME: Final[str] = 'tagged-logger'
DEFAULT_COMPONENT: Final[str] = 'tagged_logger'
