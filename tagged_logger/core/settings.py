"""Environment-driven settings.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from typing import Final

# Third-party (alphabetical)
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Local imports (core first, then alphabetical)
from .constants import DEVELOPMENT_ENVIRONMENTS, ENV_PREFIX
from .types import SinkKind

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("DEFAULT_SINK", "GateSettings", "TaggedLoggerSettings")

# =============================================================================
# Section 3: Constants
# =============================================================================
DEFAULT_SINK: Final[SinkKind] = "rich"


# =============================================================================
# Section 11: Classes
# =============================================================================
class GateSettings(BaseSettings):
    """Flags deciding whether log output is permitted.

    Read on every log call, so only process environment variables are
    consulted; no ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        validate_default=True,
    )

    editor: bool = Field(default=False, description="Running inside an interactive editor session")
    development_build: bool = Field(default=False, description="Build flagged for development diagnostics")
    environment: str = Field(default="production", description="Deployment environment name")

    @property
    def development_mode(self) -> bool:
        """Whether log output is permitted."""
        return self.editor or self.development_build or self.environment.strip().lower() in DEVELOPMENT_ENVIRONMENTS


class TaggedLoggerSettings(GateSettings):
    """Full settings, including the default sink.

    Environment variables are prefixed with TAGGED_LOGGER_.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        extra="ignore",
        validate_default=True,
    )

    sink: SinkKind = Field(default=DEFAULT_SINK, description="Default console sink")
