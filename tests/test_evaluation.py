import copy

import pytest
from hypothesis import given, strategies as st

from risp.errors import (
    RispNumericUnderflow,
    RispTypeMismatch,
    RispUnboundIdentifier,
)
from risp.evaluation.evaluator import evaluate
from risp.types.ast import (
    Add, Apply, Bool, Define, Equal, Function, Ident, If, Minus, Num, literal,
)
from risp.types.environment import Environment
from risp.types.objects import BoolObject, FunctionObject, NumObject


# -----------------------------------------------------
# Literals and arithmetic
# -----------------------------------------------------

@given(st.integers(min_value=0, max_value=2**64))
def test_num_evaluates_to_itself(n):
    assert evaluate(Num(n), Environment()) == NumObject(n)


def test_bool_literals(env):
    assert evaluate(Bool(True), env) == BoolObject(True)
    assert evaluate(Bool(False), env) == BoolObject(False)


@given(st.integers(min_value=0, max_value=10**9), st.integers(min_value=0, max_value=10**9))
def test_add_and_minus(a, b):
    assert evaluate(Add(Num(a), Num(b)), Environment()) == NumObject(a + b)
    if a >= b:
        assert evaluate(Minus(Num(a), Num(b)), Environment()) == NumObject(a - b)
    else:
        with pytest.raises(RispNumericUnderflow):
            evaluate(Minus(Num(a), Num(b)), Environment())


def test_left_associated_chain(env):
    expr = Add(Add(Add(Add(Num(1), Num(2)), Num(3)), Num(4)), Num(5))
    assert evaluate(expr, env) == NumObject(15)


def test_minus_of_sum(env):
    assert evaluate(Minus(Add(Num(1), Num(2)), Num(2)), env) == NumObject(1)


@pytest.mark.parametrize(
    "expr",
    [
        Add(Bool(True), Num(1)),
        Add(Num(1), Bool(False)),
        Minus(Function(("x",), Ident("x")), Num(1)),
    ],
)
def test_arithmetic_type_mismatch(env, expr):
    with pytest.raises(RispTypeMismatch):
        evaluate(expr, env)


def test_define_in_left_operand_is_visible_to_right(env):
    expr = Add(Define("x", Num(4)), Ident("x"))
    assert evaluate(expr, env) == NumObject(8)
    assert env["x"] == NumObject(4)


# -----------------------------------------------------
# If / Equal
# -----------------------------------------------------

@pytest.mark.parametrize(
    "cond,expected",
    [
        (Bool(True), NumObject(1)),
        (Bool(False), NumObject(2)),
        (Num(1), NumObject(1)),
        (Num(42), NumObject(1)),
        (Num(0), NumObject(2)),
    ],
)
def test_if_truthiness(env, cond, expected):
    assert evaluate(If(cond, Num(1), Num(2)), env) == expected


def test_if_function_condition_is_type_mismatch(env):
    with pytest.raises(RispTypeMismatch):
        evaluate(If(Function((), Num(1)), Num(1), Num(2)), env)


def test_if_only_evaluates_selected_branch(env):
    expr = If(Bool(True), Define("taken", Num(1)), Define("skipped", Num(2)))
    evaluate(expr, env)
    assert "taken" in env
    assert "skipped" not in env
    # The untaken branch would fail if it were evaluated
    assert evaluate(If(Num(0), Ident("missing"), Num(7)), env) == NumObject(7)


def test_equal(env):
    assert evaluate(Equal(Num(3), Add(Num(1), Num(2))), env) == BoolObject(True)
    assert evaluate(Equal(Num(0), Add(Num(1), Num(2))), env) == BoolObject(False)


def test_equal_across_kinds_is_false(env):
    assert evaluate(Equal(Num(1), Bool(True)), env) == BoolObject(False)
    assert evaluate(Equal(Num(0), Bool(False)), env) == BoolObject(False)


def test_equal_functions_compare_structurally(env):
    f = Function(("x",), Add(Ident("x"), Num(2)))
    g = Function(("x",), Add(Ident("x"), Num(2)))
    h = Function(("y",), Add(Ident("y"), Num(2)))
    assert evaluate(Equal(f, g), env) == BoolObject(True)
    assert evaluate(Equal(f, h), env) == BoolObject(False)


# -----------------------------------------------------
# Define / Ident
# -----------------------------------------------------

def test_define_and_lookup(env):
    assert evaluate(Define("x", Num(1)), env) == NumObject(1)
    assert env["x"] == NumObject(1)
    assert evaluate(Ident("x"), env) == NumObject(1)
    assert evaluate(Add(Num(3), Ident("x")), env) == NumObject(4)


def test_redefine_overwrites(env):
    evaluate(Define("x", Num(1)), env)
    evaluate(Define("x", Bool(False)), env)
    assert env["x"] == BoolObject(False)


def test_unbound_identifier(env):
    with pytest.raises(RispUnboundIdentifier) as exc:
        evaluate(Ident("nope"), env)
    assert exc.value.name == "nope"


def test_error_short_circuits_right_operand(env):
    with pytest.raises(RispUnboundIdentifier):
        evaluate(Add(Ident("nope"), Define("y", Num(1))), env)
    assert "y" not in env


# -----------------------------------------------------
# Functions
# -----------------------------------------------------

def test_function_literal_reifies(env):
    body = Add(Ident("x"), Num(2))
    assert evaluate(Function(("x",), body), env) == FunctionObject(("x",), body)


def test_plus_two(env):
    evaluate(Define("plus_two", Function(("x",), Add(Ident("x"), Num(2)))), env)
    assert evaluate(Apply(Ident("plus_two"), (Num(3),)), env) == NumObject(5)


def test_multi_argument_application(env):
    f = Function(("a", "b"), Add(Ident("a"), Add(Ident("b"), Num(1))))
    evaluate(Define("f", f), env)
    assert evaluate(Apply(Ident("f"), (Num(10), Num(20))), env) == NumObject(31)


def test_inline_function_literal_as_callee(env):
    f = Function(("a", "b"), Add(Ident("a"), Add(Ident("b"), Num(1))))
    assert evaluate(Apply(f, (Num(100), Num(200))), env) == NumObject(301)
    assert len(env) == 0


def test_recursive_sum(env):
    n = Ident("n")
    body = If(
        Equal(n, Num(1)),
        Num(1),
        Add(n, Apply(Ident("sum"), (Minus(n, Num(1)),))),
    )
    evaluate(Define("sum", Function(("n",), body)), env)
    assert evaluate(Apply(Ident("sum"), (Num(100),)), env) == NumObject(5050)


# -----------------------------------------------------
# Builder helpers
# -----------------------------------------------------

def test_literal_conversion():
    assert literal(3) == Num(3)
    assert literal(True) == Bool(True)
    assert literal(False) == Bool(False)
    with pytest.raises(RispTypeMismatch):
        literal("3")


def test_ast_is_hashable_and_comparable():
    a = Apply(Ident("f"), (Num(1), Bool(True)))
    b = Apply(Ident("f"), (Num(1), Bool(True)))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Apply(Ident("f"), (Num(1),))


def test_deepcopied_function_object_compares_equal(env):
    fn = evaluate(Function(("a", "b"), Add(Ident("a"), Ident("b"))), env)
    clone = copy.deepcopy(fn)
    assert clone == fn
    assert clone is not fn
