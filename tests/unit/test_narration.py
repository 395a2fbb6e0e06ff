"""
Tests for the Step Narrator

Checks:
1. To-decimal family: negative sign, positional expansion, fraction, final step
2. From-decimal family: divisions, multiplications, combine step
3. Bridging step
4. Lowercase narration letters vs uppercase final literal
5. Configurable display precision
"""

import pytest

from numconv.core.domain import NumeralSystem
from numconv.core.math import parse_literal, render_magnitude
from numconv.narration import bridging_step, from_decimal_steps, to_decimal_steps


# =============================================================================
# TO-DECIMAL
# =============================================================================


class TestToDecimalSteps:
    """Source literal -> decimal"""

    def test_binary_integer(self) -> None:
        steps = to_decimal_steps(parse_literal("1011", NumeralSystem.BINARY))

        assert len(steps) == 2
        assert steps[0].label == "Convert integer part - multiply each digit by its position value"
        assert steps[0].calculation == "1 × 2^3 + 0 × 2^2 + 1 × 2^1 + 1 × 2^0"
        assert steps[0].result == "1 + 2 + 0 + 8 = 11"
        assert steps[1].label == "Final result"
        assert steps[1].calculation == "binary to decimal conversion"
        assert steps[1].result == "11"

    def test_negative_binary_with_fraction(self) -> None:
        steps = to_decimal_steps(parse_literal("-1011.101", NumeralSystem.BINARY))

        assert [s.label for s in steps] == [
            "Handle negative sign",
            "Convert integer part - multiply each digit by its position value",
            "Convert fractional part - multiply each digit by negative powers",
            "Add integer and fractional parts",
        ]
        assert steps[0].calculation == "Input is negative: -1011.101"
        assert steps[0].result == "Keep the negative sign for final result"
        assert steps[2].calculation == "1 × 2^-1 + 0 × 2^-2 + 1 × 2^-3"
        assert steps[2].result == "0.500000 + 0.000000 + 0.125000 = 0.625000"
        assert steps[3].calculation == "11 + 0.625000"
        assert steps[3].result == "-11.625"

    def test_hexadecimal_letters_uppercased_in_terms(self) -> None:
        steps = to_decimal_steps(parse_literal("1a.f", NumeralSystem.HEXADECIMAL))

        assert steps[0].calculation == "1 × 16^1 + A × 16^0"
        assert steps[0].result == "10 + 16 = 26"
        assert steps[1].calculation == "F × 16^-1"
        assert steps[1].result == "0.937500 = 0.937500"
        assert steps[2].calculation == "26 + 0.937500"
        assert steps[2].result == "26.9375"

    def test_octal_with_fraction(self) -> None:
        steps = to_decimal_steps(parse_literal("157.24", NumeralSystem.OCTAL))

        assert steps[0].result == "7 + 40 + 64 = 111"
        assert steps[-1].calculation == "111 + 0.312500"
        assert steps[-1].result == "111.3125"

    def test_precision(self) -> None:
        steps = to_decimal_steps(parse_literal("0.1", NumeralSystem.BINARY), precision=2)
        assert steps[1].result == "0.50 = 0.50"
        assert steps[2].calculation == "0 + 0.50"


# =============================================================================
# FROM-DECIMAL
# =============================================================================


class TestFromDecimalSteps:
    """Decimal -> target literal"""

    def test_integer_to_binary(self) -> None:
        rendering = render_magnitude(11.0, NumeralSystem.BINARY)
        steps = from_decimal_steps(11.0, rendering, NumeralSystem.BINARY)

        assert len(steps) == 2
        assert steps[0].label == "Convert integer part - divide by 2 repeatedly"
        assert steps[0].calculation == (
            "11 ÷ 2 = 5 remainder 1\n"
            "5 ÷ 2 = 2 remainder 1\n"
            "2 ÷ 2 = 1 remainder 0\n"
            "1 ÷ 2 = 0 remainder 1"
        )
        assert steps[0].result == "Read remainders from bottom to top for integer part"
        assert steps[1].label == "Combine results"
        assert steps[1].calculation == "1011"
        assert steps[1].result == "Final result: 1011"

    def test_remainder_letters_lowercase(self) -> None:
        rendering = render_magnitude(255.0, NumeralSystem.HEXADECIMAL)
        steps = from_decimal_steps(255.0, rendering, NumeralSystem.HEXADECIMAL)

        assert steps[0].calculation == (
            "255 ÷ 16 = 15 remainder f\n"
            "15 ÷ 16 = 0 remainder f"
        )
        assert steps[-1].calculation == "ff"
        assert steps[-1].result == "Final result: FF"

    def test_negative_with_fraction(self) -> None:
        rendering = render_magnitude(10.5, NumeralSystem.BINARY, is_negative=True)
        steps = from_decimal_steps(10.5, rendering, NumeralSystem.BINARY)

        assert [s.label for s in steps] == [
            "Handle negative number",
            "Convert integer part - divide by 2 repeatedly",
            "Convert fractional part - multiply by 2 repeatedly",
            "Combine results",
        ]
        assert steps[0].calculation == "Working with absolute value: 10.5"
        assert steps[0].result == "Will add negative sign to final result"
        assert steps[2].calculation == "0.500000 × 2 = 1.000000 → digit: 1"
        assert steps[2].result == "Take integer parts in order: 0.1"
        assert steps[3].calculation == "Add negative sign: -1010.1"
        assert steps[3].result == "Final result: -1010.1"

    def test_pure_fraction_has_no_division_step(self) -> None:
        rendering = render_magnitude(0.5, NumeralSystem.BINARY)
        steps = from_decimal_steps(0.5, rendering, NumeralSystem.BINARY)

        assert [s.label for s in steps] == [
            "Convert fractional part - multiply by 2 repeatedly",
            "Combine results",
        ]

    def test_multiplication_lines_capped(self) -> None:
        rendering = render_magnitude(0.1, NumeralSystem.BINARY)
        steps = from_decimal_steps(0.1, rendering, NumeralSystem.BINARY)

        fraction_step = steps[0]
        assert len(fraction_step.calculation.split("\n")) == 10
        assert fraction_step.result == "Take integer parts in order: 0.0001100110"

    def test_hexadecimal_fraction_digit_lowercase(self) -> None:
        rendering = render_magnitude(0.9375, NumeralSystem.HEXADECIMAL)
        steps = from_decimal_steps(0.9375, rendering, NumeralSystem.HEXADECIMAL)

        assert steps[0].calculation == "0.937500 × 16 = 15.000000 → digit: f"
        assert steps[0].result == "Take integer parts in order: 0.f"
        assert steps[1].result == "Final result: 0.F"

    def test_forced_fraction_zero(self) -> None:
        """'5.0' has no multiplication step but keeps '.0' in the combine step"""
        rendering = render_magnitude(5.0, NumeralSystem.BINARY, has_fractional_part=True)
        steps = from_decimal_steps(5.0, rendering, NumeralSystem.BINARY)

        assert [s.label for s in steps] == [
            "Convert integer part - divide by 2 repeatedly",
            "Combine results",
        ]
        assert steps[-1].calculation == "101.0"

    def test_zero(self) -> None:
        rendering = render_magnitude(0.0, NumeralSystem.OCTAL)
        steps = from_decimal_steps(0.0, rendering, NumeralSystem.OCTAL)

        assert len(steps) == 1
        assert steps[0].result == "Final result: 0"


# =============================================================================
# BRIDGE
# =============================================================================


class TestBridgingStep:
    """Explicit decimal hop"""

    @pytest.mark.parametrize(
        "literal,expected_calculation",
        [("ff", "255 → binary"), ("-ff", "-255 → binary")],
    )
    def test_bridge(self, literal: str, expected_calculation: str) -> None:
        parsed = parse_literal(literal, NumeralSystem.HEXADECIMAL)
        rendering = render_magnitude(
            parsed.decimal_value, NumeralSystem.BINARY, is_negative=parsed.is_negative
        )
        step = bridging_step(parsed, NumeralSystem.BINARY, rendering)

        assert step.label == "Convert decimal to binary"
        assert step.calculation == expected_calculation
        assert step.result == rendering.text
