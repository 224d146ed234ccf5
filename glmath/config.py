# glmath/config.py
"""
Numerical policy for operations that take a normal or an axis.

reflect/refract and Quat.from_axis_angle normalize their direction argument
unless told it is already unit length. The policy is passed explicitly to
those calls; DEFAULT_CONFIG is the safe one.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import os

logger = logging.getLogger(__name__)

ENV_ASSUME_NORMALIZED = 'GLMATH_ASSUME_NORMALIZED'

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class MathConfig:
    assume_normalized: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> MathConfig:
        """Build a config from GLMATH_ASSUME_NORMALIZED, if set."""
        env = os.environ if environ is None else environ
        raw = env.get(ENV_ASSUME_NORMALIZED)
        if raw is None:
            logger.debug("assume_normalized=False (%s unset)", ENV_ASSUME_NORMALIZED)
            return cls()

        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            assume_normalized = True
        elif value in _FALSE_VALUES:
            assume_normalized = False
        else:
            raise ValueError(
                f"{ENV_ASSUME_NORMALIZED} must be a boolean flag, got {raw!r}"
            )

        logger.debug("assume_normalized=%s (from %s)", assume_normalized, ENV_ASSUME_NORMALIZED)
        return cls(assume_normalized=assume_normalized)


DEFAULT_CONFIG = MathConfig()
