"""Step narration for conversions."""

from .steps import bridging_step, from_decimal_steps, to_decimal_steps

__all__ = [
    "bridging_step",
    "from_decimal_steps",
    "to_decimal_steps",
]
