import cmath
import math

import pytest

from fundalgo.complexnum import ComplexNumber, main

C1 = ComplexNumber(3.0, 4.0)
C2 = ComplexNumber(1.0, -2.0)


def _native(c):
    return complex(c.real, c.imaginary)


def test_arithmetic_matches_builtin_complex():
    for result, expected in (
        (C1 + C2, _native(C1) + _native(C2)),
        (C1 - C2, _native(C1) - _native(C2)),
        (C1 * C2, _native(C1) * _native(C2)),
        (C1 / C2, _native(C1) / _native(C2)),
    ):
        assert _native(result) == pytest.approx(expected)


def test_division_round_trip():
    back = (C1 / C2) * C2
    assert back.real == pytest.approx(C1.real)
    assert back.imaginary == pytest.approx(C1.imaginary)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError, match="Division by zero"):
        C1 / ComplexNumber()


def test_modulus():
    assert abs(C1) == pytest.approx(5.0)
    assert C1.sqabs() == pytest.approx(25.0)


@pytest.mark.parametrize(
    "real,imag", [(3.0, 4.0), (-1.0, 1.0), (-2.0, -3.0), (1.0, -2.0)]
)
def test_arg_off_axis(real, imag):
    assert ComplexNumber(real, imag).arg() == pytest.approx(cmath.phase(complex(real, imag)))


def test_arg_on_axes():
    assert ComplexNumber(0, 2).arg() == pytest.approx(math.pi / 2)
    assert ComplexNumber(0, -2).arg() == pytest.approx(-math.pi / 2)
    assert ComplexNumber(0, 0).arg() == 0
    assert ComplexNumber(-1, 0).arg() == 0


def test_str_forms():
    assert str(C1) == "3 + 4i"
    assert str(C2) == "1 - 2i"
    assert str(ComplexNumber()) == "0"
    assert str(ComplexNumber(0, -2)) == "- 2i"
    assert str(ComplexNumber(2.5, 0)) == "2.5"


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"Sum: {C1 + C2}"
    assert lines[2] == f"Product: {C1 * C2}"
    assert lines[4] == "Absolute value of c1: 5"
    assert lines[5].startswith("Argument of c1: ")