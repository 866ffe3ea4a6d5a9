import pytest

from carlae.builtin.env_builtin import BUILTINS, add, div
from carlae.errors import (
    CarlaeArityError,
    CarlaeEvaluationError,
    CarlaeTypeError,
    CarlaeZeroDivisionError,
)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 20 2 5)", 2),
        ("(+ 7)", 7),
        ("(- 7)", 7),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(/ 1 2)", 0.5),
        ("(/ 1 4 2)", 0.125),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["(+)", "(-)", "(*)", "(/)"])
def test_zero_arguments_is_an_error(run, source):
    with pytest.raises(CarlaeArityError):
        run(source)


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 5 2 0)", "(/ 1.5 0.0)"])
def test_division_by_zero(run, source):
    with pytest.raises(CarlaeZeroDivisionError):
        run(source)
    # Also an evaluation error in the general taxonomy
    with pytest.raises(CarlaeEvaluationError):
        run(source)


@pytest.mark.parametrize("source", ["(+ 1 @t)", "(* @f 2)", "(+ 1 +)", "(- 3 (fun (x) x))"])
def test_non_numeric_arguments(run, source):
    with pytest.raises(CarlaeTypeError):
        run(source)


def test_registry_is_fixed():
    assert set(BUILTINS) == {"+", "-", "*", "/"}
    with pytest.raises(TypeError):
        BUILTINS["%"] = add


def test_builtins_fold_left_to_right():
    assert div([100, 10, 5]) == 2
    assert add([1, 2, 3, 4]) == 10


BIG_INT = "1" + "0" * 400
BIG_FLOAT = "1" + "0" * 308 + ".0"


@pytest.mark.parametrize(
    "source",
    [
        f"(/ {BIG_INT} 3)",
        f"(+ 1.5 {BIG_INT})",
        f"(- {BIG_INT} 0.5)",
        f"(* {BIG_FLOAT} 10.0)",
        f"(+ {BIG_FLOAT} {BIG_FLOAT})",
    ]
)
def test_overflow_is_an_evaluation_error(run, source):
    with pytest.raises(CarlaeEvaluationError):
        run(source)


def test_large_integers_stay_exact(run):
    assert run(f"(* {BIG_INT} 2)") == 2 * int(BIG_INT)
