import pytest
from hypothesis import given, strategies as st

from schemer import errors
from schemer.builtins import BUILTINS, create_root_environment
from schemer.interpreter import Interpreter
from schemer.types import FALSE, TRUE, BuiltinProcedure, number


def test_root_environment_has_single_global_frame():
    env = create_root_environment()
    assert env.depth == 1
    for name in BUILTINS:
        assert isinstance(env.lookup(name), BuiltinProcedure)
    assert env.lookup("#t") == TRUE
    assert env.lookup("#f") == FALSE


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+)", number(0)),
        ("(*)", number(1)),
        ("(- 5)", number(-5)),
        ("(/ 5)", number(5)),
        ("(+ 137 349)", number(486)),
        ("(- 1000 334)", number(666)),
        ("(* 5 99)", number(495)),
        ("(/ 10 5)", number(2)),
        ("(- 10 3 2)", number(5)),
        ("(/ 120 2 3)", number(20)),
        ("(+ 1 2.5 3)", number(6.5)),
        ("(* 1 2 3 4 5 6)", number(720)),
        ("(- -10 -5)", number(-5)),
        ("(/ -12 3)", number(-4)),
        ("(/ 10 4)", number(2.5)),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,exact",
    [("(/ 10 5)", True), ("(/ 10 4)", False), ("(+ 1 2.0)", False), ("(* 2.0 1)", False), ("(- 5)", True)]
)
def test_result_exactness(run, source, exact):
    assert run(source).value.is_exact is exact


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(<)", TRUE),
        ("(> 1)", TRUE),
        ("(=)", TRUE),
        ("(< 1 2 3)", TRUE),
        ("(< 1 3 2)", FALSE),
        ("(> 3 2 1)", TRUE),
        ("(> 3 3)", FALSE),
        ("(= 1 1.0 1)", TRUE),
        ("(= 1 1 2)", FALSE),
        ("(< 1 1.5)", TRUE),
    ]
)
def test_comparisons(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source", ['(+ 1 "a")', "(* #t 2)", '(- "a")', "(/ 1 +)", '(< 1 "2")', "(= #f)"]
)
def test_type_errors(run, source):
    with pytest.raises(errors.SchemerTypeError, match="Expecting number"):
        run(source)


@pytest.mark.parametrize("name", ["-", "/"])
def test_count_errors(run, name):
    with pytest.raises(errors.SchemerArityError, match=rf"Incorrect argument count in call \({name}\)"):
        run(f"({name})")


def test_integer_division_by_zero(run):
    with pytest.raises(errors.SchemerDivisionByZero):
        run("(/ 1 0)")


def test_float_division_by_zero(run):
    assert str(run("(/ 1 0.0)")) == "+inf"
    assert str(run("(/ -1.0 0)")) == "-inf"


def test_booleans_can_be_rebound(run):
    # #t and #f are ordinary global bindings
    assert run("(define #t 0) #t") == number(0)


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=8))
def test_chained_less_than(values):
    itp = Interpreter()
    source = "(< " + " ".join(str(v) for v in values) + ")"
    expected = all(a < b for a, b in zip(values, values[1:]))
    assert itp.eval_one(source) == (TRUE if expected else FALSE)


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=8))
def test_sum_matches_python(values):
    itp = Interpreter()
    source = "(+ " + " ".join(str(v) for v in values) + ")"
    assert itp.eval_one(source) == number(sum(values))


POW = "(define (pow n) (cond ((= n 0) 1) (#t (* 1000000000 (pow (- n 1))))))"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 0.5 (pow 40))", "+inf"),
        ("(- 0.5 (pow 40))", "-inf"),
        ("(/ (pow 40) 7)", "+inf"),
        ("(/ (pow 40) (pow 40))", "1"),
        ("(< 0.5 (pow 40))", "#t"),
        ("(> 0.5 (pow 40))", "#f"),
    ]
)
def test_large_exact_values_mixed_with_floats(run, source, expected):
    assert str(run(f"{POW} {source}")) == expected
