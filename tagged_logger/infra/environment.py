"""Environment predicates deciding whether log output is permitted.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from dataclasses import dataclass

# Third-party (alphabetical)
from pydantic import ValidationError

# Local imports (core first, then alphabetical)
from ..core.settings import GateSettings

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("SettingsPredicate", "StaticPredicate")


# =============================================================================
# Section 9: Dataclasses
# =============================================================================
@dataclass(frozen=True)
class SettingsPredicate:
    """Read the gate flags from the environment on every call.

    Nothing is cached, so toggling ``TAGGED_LOGGER_EDITOR`` or
    ``TAGGED_LOGGER_DEVELOPMENT_BUILD`` takes effect on the next log call.
    Unparseable flags count as a production session.
    """

    def __call__(self) -> bool:
        try:
            return GateSettings().development_mode
        except ValidationError:
            return False


@dataclass(frozen=True)
class StaticPredicate:
    """Constant answer, for tests and hosts that decide once at startup."""

    value: bool

    def __call__(self) -> bool:
        return self.value
