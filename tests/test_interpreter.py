import pytest

from carlae.builtin.env_builtin import BUILTIN_ENV, global_environment
from carlae.errors import CarlaeNameError, CarlaeSyntaxError
from carlae.interpreter import Interpreter, evaluate_top_level, stringify
from carlae.types.symbol import Symbol


def test_evaluate_top_level_creates_environment():
    result, env = evaluate_top_level("(def x 4)")
    assert result == 4
    assert env.outer is BUILTIN_ENV
    assert env.lookup(Symbol("x")) == 4


def test_evaluate_top_level_threads_environment():
    _, env = evaluate_top_level("(def (sq n) (* n n))")
    result, same = evaluate_top_level("(sq 9)", env)
    assert result == 81
    assert same is env


def test_fresh_sessions_are_independent():
    _, first = evaluate_top_level("(def x 1)")
    _, second = evaluate_top_level("(+ 1 1)")
    assert Symbol("x") not in second
    with pytest.raises(CarlaeNameError):
        evaluate_top_level("x", global_environment())


@pytest.mark.parametrize("source", ["(+ 1 2", "1 2", ")", "", "# just a comment", "(a) (b)"])
def test_syntax_errors_surface(source):
    with pytest.raises(CarlaeSyntaxError):
        evaluate_top_level(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", "3"),
        ("(/ 20 2 5)", "2"),
        ("(/ 1 2)", "0.5"),
        ("-7", "-7"),
        ("2.5", "2.5"),
        ("@t", "@t"),
        ("@f", "@f"),
        ("+", "builtin function"),
        ("(fun (x) x)", "function object"),
        ("(def (f) 1)", "function object"),
    ]
)
def test_stringify(source, expected):
    result, _ = evaluate_top_level(source)
    assert stringify(result) == expected


def test_interpreter_session():
    interp = Interpreter()
    interp.eval("(def (fact n) (if n (* n (fact (- n 1))) 1))")
    assert interp.eval("(fact 6)") == 720
    assert interp.eval_to_string("(fact 3)") == "6"


def test_interpreter_keeps_state_after_errors():
    interp = Interpreter()
    interp.eval("(def x 2)")
    with pytest.raises(CarlaeNameError):
        interp.eval("(+ x y)")
    assert interp.eval("(* x 21)") == 42
