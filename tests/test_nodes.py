import pytest

from dragontiger.location import NO_LOCATION
from dragontiger.nodes import (
    Assign,
    BinaryOperator,
    Break,
    ForLoop,
    FunCall,
    FunDecl,
    Identifier,
    IntegerLiteral,
    Operator,
    Sequence,
    Type,
    VarDecl,
    WhileLoop,
)
from dragontiger.symbols import Symbol


class _Recorder:
    def __init__(self):
        self.seen = []

    def visit(self, node):
        self.seen.append(node)
        return len(self.seen)


def _int(n):
    return IntegerLiteral(NO_LOCATION, n)


def test_operator_spellings_follow_source_order():
    spellings = ["+", "-", "*", "/", "=", "<>", "<", "<=", ">", ">="]
    operators = [Operator(s) for s in spellings]
    assert operators == list(Operator)
    assert Operator("+") is Operator.PLUS


def test_type_starts_undefined_and_sets_once():
    lit = _int(1)
    assert lit.type is Type.UNDEF
    lit.type = Type.INT
    assert lit.type is Type.INT
    with pytest.raises(ValueError):
        lit.type = Type.STRING


def test_type_cannot_be_set_to_undef():
    with pytest.raises(ValueError):
        _int(1).type = Type.UNDEF


def test_accept_returns_visitor_result():
    visitor = _Recorder()
    lit = _int(5)
    assert lit.accept(visitor) == 1
    assert visitor.seen == [lit]


def test_binary_operator_fields():
    left, right = _int(1), _int(2)
    binop = BinaryOperator(NO_LOCATION, left, right, Operator.PLUS)
    assert binop.left is left
    assert binop.right is right
    assert binop.op is Operator.PLUS


def test_identifier_decl_and_depth_set_once():
    decl = VarDecl(NO_LOCATION, Symbol("x"), None, _int(0))
    ident = Identifier(NO_LOCATION, Symbol("x"))
    assert ident.decl is None
    assert ident.depth == -1
    ident.decl = decl
    ident.depth = 2
    assert ident.decl is decl
    assert ident.depth == 2
    with pytest.raises(ValueError):
        ident.decl = decl
    with pytest.raises(ValueError):
        ident.depth = 3


def test_decl_depth_rejects_unset_value():
    decl = VarDecl(NO_LOCATION, Symbol("x"), None, None)
    with pytest.raises(ValueError):
        decl.depth = -1
    assert decl.depth == -1
    decl.depth = 1
    assert decl.depth == 1


def test_var_decl_defaults():
    decl = VarDecl(NO_LOCATION, Symbol("y"), Symbol("int"), None)
    assert decl.expr is None
    assert decl.read_only is False
    assert decl.escapes is False
    decl.escapes = True
    assert decl.escapes is True


def test_fun_decl_external_name_and_parent():
    outer = FunDecl(NO_LOCATION, Symbol("outer"), None, [], _int(0))
    inner = FunDecl(NO_LOCATION, Symbol("inner"), None, [], _int(1))
    assert inner.external_name == Symbol()
    assert inner.is_external is False
    assert inner.escaping_decls == []
    inner.external_name = Symbol("outer.inner")
    inner.parent = outer
    assert inner.external_name == Symbol("outer.inner")
    assert inner.parent is outer
    with pytest.raises(ValueError):
        inner.external_name = Symbol("again")


def test_fun_decl_escaping_lists_are_separate():
    first = FunDecl(NO_LOCATION, Symbol("f"), None, [], None)
    second = FunDecl(NO_LOCATION, Symbol("g"), None, [], None)
    first.escaping_decls.append(VarDecl(NO_LOCATION, Symbol("a"), None, None))
    assert second.escaping_decls == []


def test_fun_call_resolution():
    decl = FunDecl(NO_LOCATION, Symbol("f"), None, [], _int(0))
    call = FunCall(NO_LOCATION, [_int(1)], Symbol("f"))
    call.decl = decl
    assert call.decl is decl
    assert call.func_name == Symbol("f")


def test_break_loop_set_once():
    loop = WhileLoop(NO_LOCATION, _int(1), Break(NO_LOCATION))
    brk = loop.body
    assert brk.loop is None
    brk.loop = loop
    assert brk.loop is loop
    with pytest.raises(ValueError):
        brk.loop = loop


def test_for_loop_and_assign_structure():
    var = VarDecl(NO_LOCATION, Symbol("i"), None, _int(0))
    body = Assign(NO_LOCATION, Identifier(NO_LOCATION, Symbol("i")), _int(3))
    loop = ForLoop(NO_LOCATION, var, _int(10), body)
    assert loop.variable is var
    assert loop.body.lhs.name == var.name


def test_nodes_compare_by_identity():
    first = _int(1)
    second = _int(1)
    assert (first == second) is False
    assert (first == first) is True
    seq = Sequence(NO_LOCATION, [])
    assert (seq == seq) is True
    assert (seq == Sequence(NO_LOCATION, [])) is False