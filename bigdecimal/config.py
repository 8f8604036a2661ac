"""Scale bounds for BigDecimal.

Scales are held as Python ints, but legal values are kept inside a
fixed-width range so that runaway scale arithmetic (huge powers of values
with many fractional digits, extreme exponents in literals) fails loudly
with DomainError instead of growing without bound.

The defaults match a signed 32-bit scale. They can be widened or narrowed
through the environment:

    BIGDECIMAL_MIN_SCALE=-1000000 BIGDECIMAL_MAX_SCALE=1000000
"""

import os
from functools import lru_cache

import structlog
from pydantic import BaseModel, ConfigDict, Field

from bigdecimal.errors import DomainError

logger = structlog.get_logger()

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

MIN_SCALE_ENV = "BIGDECIMAL_MIN_SCALE"
MAX_SCALE_ENV = "BIGDECIMAL_MAX_SCALE"


class DecimalConfig(BaseModel):
    """Bounds applied to every scale a BigDecimal can take.

    Attributes:
        min_scale: Smallest legal scale (most implicit trailing zeros)
        max_scale: Largest legal scale (most fractional digits)
    """

    model_config = ConfigDict(frozen=True)

    min_scale: int = Field(default=INT32_MIN, ge=INT64_MIN, le=0)
    max_scale: int = Field(default=INT32_MAX, ge=0, le=INT64_MAX)

    def check_scale(self, scale: int) -> int:
        """Return scale unchanged if legal.

        Raises:
            DomainError: If scale lies outside [min_scale, max_scale]
        """
        if scale > self.max_scale:
            raise DomainError(f"Scale overflow: {scale} > {self.max_scale}")
        if scale < self.min_scale:
            raise DomainError(f"Scale underflow: {scale} < {self.min_scale}")
        return scale

    def in_range(self, scale: int) -> bool:
        """Check a scale against the bounds without raising."""
        return self.min_scale <= scale <= self.max_scale


DEFAULT_CONFIG = DecimalConfig()


@lru_cache
def get_config() -> DecimalConfig:
    """Load the active configuration from the environment.

    Unset variables keep their defaults. The result is cached; call
    get_config.cache_clear() after changing the environment.

    Raises:
        pydantic.ValidationError: If a variable is not an integer or the
            bounds are inconsistent
    """
    overrides: dict[str, str] = {}
    if MIN_SCALE_ENV in os.environ:
        overrides["min_scale"] = os.environ[MIN_SCALE_ENV]
    if MAX_SCALE_ENV in os.environ:
        overrides["max_scale"] = os.environ[MAX_SCALE_ENV]

    if not overrides:
        return DEFAULT_CONFIG

    config = DecimalConfig.model_validate(overrides)
    logger.debug(
        "bigdecimal_config_loaded",
        min_scale=config.min_scale,
        max_scale=config.max_scale,
    )
    return config
