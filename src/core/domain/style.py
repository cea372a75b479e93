"""Style vocabulary shared by every Bootstrap helper.

This module centralizes the semantic options (colour role, size, spacing,
validation state) that map onto Bootstrap class suffixes. Keeping it in the
domain layer lets the composer, the adapters and the CLI share a single
source of truth.
"""

from __future__ import annotations

from enum import Enum


class Variant(str, Enum):
    """Bootstrap colour roles."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def default(cls) -> "Variant":
        """Return the colour role used when none is given."""

        return cls.PRIMARY


class Size(str, Enum):
    """Bootstrap sizing modifiers."""

    DEFAULT = "default"
    SMALL = "small"
    LARGE = "large"

    @property
    def token(self) -> str:
        """Class suffix (`sm`/`lg`); empty for the default size."""

        return _SIZE_TOKENS[self]


_SIZE_TOKENS = {Size.DEFAULT: "", Size.SMALL: "sm", Size.LARGE: "lg"}


class Margin(str, Enum):
    """Bottom-margin spacing utility values (`mb-*`)."""

    MARGIN_0 = "0"
    MARGIN_1 = "1"
    MARGIN_2 = "2"
    MARGIN_3 = "3"
    MARGIN_4 = "4"
    MARGIN_5 = "5"
    AUTO = "auto"


class ValidationState(str, Enum):
    """Validation outcome of a bound form field."""

    NONE = "none"
    VALID = "valid"
    INVALID = "invalid"
