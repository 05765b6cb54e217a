import math

import pytest

from algokit.calculator import calculate, main


def test_addition():
    assert calculate("+", 2, 3) == 5


def test_division():
    assert calculate("/", 7, 2) == 3.5


def test_multiplication_commutes():
    assert calculate("*", 2.5, -4) == calculate("*", -4, 2.5)


def test_subtraction_antisymmetric():
    assert calculate("-", 9, 4) == -calculate("-", 4, 9)


def test_add_then_subtract_round_trip():
    total = calculate("+", 1.25, 8)
    assert calculate("-", total, 8) == 1.25


def test_divide_then_multiply_round_trip():
    quotient = calculate("/", 12, 4)
    assert calculate("*", quotient, 4) == 12


def test_division_by_zero_gives_infinity():
    result = calculate("/", 5, 0)
    assert math.isinf(result) and result > 0
    negative = calculate("/", -5, 0)
    assert math.isinf(negative) and negative < 0


def test_zero_over_zero_is_nan():
    result = calculate("/", 0, 0)
    assert str(result) == "nan"


@pytest.mark.parametrize("op", ["%", "^", "", "add"])
def test_unknown_operator(op):
    with pytest.raises(ValueError, match="operator is not correct"):
        calculate(op, 1, 2)


def test_main_with_arguments(capsys):
    assert main(["+", "2", "3"]) == 0
    assert capsys.readouterr().out.strip() == "2 + 3 = 5"


def test_main_bad_operator(capsys):
    assert main(["%", "2", "3"]) == 0
    assert capsys.readouterr().out.strip() == "Error! operator is not correct"


def test_main_prompts_for_input(monkeypatch, capsys):
    answers = iter(["*", "4 2.5"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    expected = f"4 * 2.5 = {calculate('*', 4, 2.5):g}"
    assert capsys.readouterr().out.strip() == expected


def test_main_rejects_non_numeric(capsys):
    assert main(["+", "two", "3"]) == 1
    assert "numbers" in capsys.readouterr().err