import logging

import pytest

from risp.errors import RispConfigError, RispSyntaxError
from risp.interpreter import Interpreter
from risp.types.ast import Add, Ident, Num
from risp.types.objects import BoolObject, FunctionObject, NumObject


def test_empty_source_returns_none(interp):
    assert interp.eval("") is None
    assert interp.eval("  ; only a comment") is None


def test_single_expression_returns_value(interp):
    assert interp.eval("(+ 1 2)") == NumObject(3)


def test_multiple_expressions_return_list(interp):
    assert interp.eval("(Define x 1) (+ x 1) true") == [
        NumObject(1),
        NumObject(2),
        BoolObject(True),
    ]


def test_bindings_persist_across_calls(interp):
    interp.eval("(Define plus_two (Func (x) (+ x 2)))")
    assert interp.eval("(Apply plus_two 3)") == NumObject(5)
    assert isinstance(interp.env["plus_two"], FunctionObject)


def test_eval_ast(interp):
    interp.eval("(Define x 1)")
    assert interp.eval_ast(Add(Num(3), Ident("x"))) == NumObject(4)


def test_syntax_error_propagates(interp):
    with pytest.raises(RispSyntaxError):
        interp.eval("(+ 1")


def test_display_of_results(interp):
    assert str(interp.eval("(+ 1 2)")) == "3"
    assert str(interp.eval("(== 1 1)")) == "true"
    assert str(interp.eval("(Func (x) (+ x 2))")) == "(Func (x) (+ x 2))"


def test_invalid_constructor_arguments():
    with pytest.raises(RispConfigError):
        Interpreter(max_depth=0)
    with pytest.raises(RispConfigError):
        Interpreter(underflow="wrap")


def test_application_is_logged_at_debug(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="risp"):
        interp.eval("(Apply (Func (x) x) 1)")
    assert any("Applying" in record.getMessage() for record in caplog.records)
