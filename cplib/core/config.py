"""
Engine settings — pydantic models passed to solver constructors.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_MODULUS = 1_000_000_007


class EngineConfig(BaseModel):
    """Settings shared by the rank-ordered DAG engines."""

    check_ranks: bool = Field(
        default=True,
        description="Assert the rank invariant on every discovered edge",
    )


class DigitDPConfig(BaseModel):
    """Settings for digit DP counting."""

    modulus: int = Field(
        default=DEFAULT_MODULUS,
        gt=1,
        description="Counts are reduced modulo this value",
    )
