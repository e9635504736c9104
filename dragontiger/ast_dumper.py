"""Pretty-printing and constant evaluation of Tiger ASTs."""

from __future__ import annotations

import functools
import io
from typing import TextIO

from dragontiger.errors import error
from dragontiger.nodes import (
    Assign,
    BinaryOperator,
    Break,
    ForLoop,
    FunCall,
    FunDecl,
    Identifier,
    IfThenElse,
    IntegerLiteral,
    Let,
    Node,
    Operator,
    Sequence,
    StringLiteral,
    Type,
    VarDecl,
    WhileLoop,
)

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
}


def _type_name(t: Type) -> str:
    if t is Type.INT:
        return "int"
    if t is Type.STRING:
        return "string"
    error("internal error: attempting to print the type of t_void or t_undef")


def _int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    return (value + 2**31) % 2**32 - 2**31


def _truncating_divide(lhs: int, rhs: int) -> int:
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


_ARITHMETIC = {
    Operator.PLUS: lambda a, b: a + b,
    Operator.MINUS: lambda a, b: a - b,
    Operator.TIMES: lambda a, b: a * b,
    Operator.EQ: lambda a, b: int(a == b),
    Operator.LT: lambda a, b: int(a < b),
    Operator.GT: lambda a, b: int(a > b),
    Operator.LE: lambda a, b: int(a <= b),
    Operator.GE: lambda a, b: int(a >= b),
}


class Evaluator:
    """Evaluates integer-only expressions built from literals, operators,
    sequences and conditionals."""

    def __init__(self) -> None:
        self.result = 0

    @functools.singledispatchmethod
    def visit(self, node: Node) -> int:
        raise TypeError(f"cannot visit {type(node).__name__}")

    @visit.register(IntegerLiteral)
    def _(self, node: IntegerLiteral) -> int:
        self.result = node.value
        return self.result

    @visit.register(BinaryOperator)
    def _(self, node: BinaryOperator) -> int:
        lhs = node.left.accept(self)
        rhs = node.right.accept(self)
        if node.op is Operator.DIVIDE:
            if rhs == 0:
                error("division by zero")
            value = _truncating_divide(lhs, rhs)
        elif node.op in _ARITHMETIC:
            value = _ARITHMETIC[node.op](lhs, rhs)
        else:
            error("unsupported binary operator")
        self.result = _int32(value)
        return self.result

    @visit.register(Sequence)
    def _(self, node: Sequence) -> int:
        if not node.exprs:
            error("empty sequence expression")
        for expr in node.exprs:
            expr.accept(self)
        return self.result

    @visit.register(IfThenElse)
    def _(self, node: IfThenElse) -> int:
        if node.condition.accept(self) != 0:
            node.then_part.accept(self)
        else:
            node.else_part.accept(self)
        return self.result

    @visit.register(StringLiteral)
    def _(self, node: StringLiteral) -> int:
        error("cannot evaluate string literal")

    @visit.register(Identifier)
    def _(self, node: Identifier) -> int:
        error("cannot evaluate identifier")

    @visit.register(Let)
    def _(self, node: Let) -> int:
        error("cannot evaluate let expression")

    @visit.register(FunCall)
    def _(self, node: FunCall) -> int:
        error("cannot evaluate function call")

    @visit.register(WhileLoop)
    def _(self, node: WhileLoop) -> int:
        error("cannot evaluate while loop")

    @visit.register(ForLoop)
    def _(self, node: ForLoop) -> int:
        error("cannot evaluate for loop")

    @visit.register(Break)
    def _(self, node: Break) -> int:
        error("cannot evaluate break statement")

    @visit.register(Assign)
    def _(self, node: Assign) -> int:
        error("cannot evaluate assignment")

    @visit.register(VarDecl)
    def _(self, node: VarDecl) -> int:
        error("cannot evaluate variable declaration")

    @visit.register(FunDecl)
    def _(self, node: FunDecl) -> int:
        error("cannot evaluate function declaration")


class ASTDumper:
    """Writes an AST back as indented Tiger source."""

    def __init__(self, stream: TextIO, verbose: bool = False) -> None:
        self.stream = stream
        self.verbose = verbose
        self.indent_level = 0

    def _write(self, text: str) -> None:
        self.stream.write(text)

    def _inc(self) -> None:
        self.indent_level += 1

    def _dec(self) -> None:
        self.indent_level -= 1

    def _inl(self) -> None:
        self._inc()
        self.nl()

    def _dnl(self) -> None:
        self._dec()
        self.nl()

    def nl(self) -> None:
        """Start a new line at the current indentation."""
        self._write("\n" + "  " * self.indent_level)

    def _expr_lines(self, exprs: list) -> None:
        for index, expr in enumerate(exprs):
            if index:
                self._write(";")
            self.nl()
            expr.accept(self)

    def _comma_list(self, items: list) -> None:
        for index, item in enumerate(items):
            if index:
                self._write(", ")
            item.accept(self)

    @functools.singledispatchmethod
    def visit(self, node: Node) -> None:
        raise TypeError(f"cannot visit {type(node).__name__}")

    @visit.register(IntegerLiteral)
    def _(self, node: IntegerLiteral) -> None:
        self._write(str(node.value))

    @visit.register(StringLiteral)
    def _(self, node: StringLiteral) -> None:
        escaped = "".join(_ESCAPES.get(c, c) for c in node.value.text)
        self._write(f'"{escaped}"')

    @visit.register(BinaryOperator)
    def _(self, node: BinaryOperator) -> None:
        self._write("(")
        node.left.accept(self)
        self._write(node.op.value)
        node.right.accept(self)
        self._write(")")

    @visit.register(Sequence)
    def _(self, node: Sequence) -> None:
        self._write("(")
        self._inc()
        self._expr_lines(node.exprs)
        self._dnl()
        self._write(")")

    @visit.register(Let)
    def _(self, node: Let) -> None:
        self._write("let")
        self._inc()
        for decl in node.decls:
            self.nl()
            decl.accept(self)
        self._dnl()
        self._write("in")
        self._inc()
        self._expr_lines(node.sequence.exprs)
        self._dnl()
        self._write("end")

    @visit.register(Identifier)
    def _(self, node: Identifier) -> None:
        self._write(str(node.name))
        decl = node.decl
        if self.verbose and decl is not None:
            self._write(f"/*decl:{decl.loc}")
            depth_diff = node.depth - decl.depth
            if depth_diff:
                self._write(f" depth_diff:{depth_diff}")
            self._write("*/")

    @visit.register(IfThenElse)
    def _(self, node: IfThenElse) -> None:
        self._write("if ")
        self._inl()
        node.condition.accept(self)
        self._dnl()
        self._write(" then ")
        self._inl()
        node.then_part.accept(self)
        self._dnl()
        self._write(" else ")
        self._inl()
        node.else_part.accept(self)
        self._dec()

    @visit.register(VarDecl)
    def _(self, node: VarDecl) -> None:
        if node.expr is not None:
            self._write("var ")
        self._write(str(node.name))
        if self.verbose and node.escapes:
            self._write("/*e*/")
        if node.type_name is not None:
            self._write(f": {node.type_name}")
        elif node.type not in (Type.UNDEF, Type.VOID):
            self._write(f": {_type_name(node.type)}")
        if node.expr is not None:
            self._write(" := ")
            node.expr.accept(self)

    @visit.register(FunDecl)
    def _(self, node: FunDecl) -> None:
        self._write(f"function {node.name}")
        if self.verbose and node.name != node.external_name:
            self._write(f"/*{node.external_name}*/")
        self._write("(")
        self._comma_list(node.params)
        self._write(")")
        if node.type_name is not None:
            self._write(f": {node.type_name}")
        self._write(" = ")
        self._inl()
        self.visit(node.expr)
        self._dec()

    @visit.register(FunCall)
    def _(self, node: FunCall) -> None:
        self._write(str(node.func_name))
        if self.verbose and node.decl is not None:
            self._write(f"/*decl:{node.decl.loc}*/")
        self._write("(")
        self._comma_list(node.args)
        self._write(")")

    @visit.register(WhileLoop)
    def _(self, node: WhileLoop) -> None:
        self._write("while ")
        node.condition.accept(self)
        self._write(" do")
        self._inl()
        node.body.accept(self)
        self._dec()

    @visit.register(ForLoop)
    def _(self, node: ForLoop) -> None:
        variable = node.variable
        self._write(f"for {variable.name}")
        if self.verbose and variable.escapes:
            self._write("/*e*/")
        self._write(" := ")
        self.visit(variable.expr)
        self._write(" to ")
        node.high.accept(self)
        self._write(" do")
        self._inl()
        node.body.accept(self)
        self._dec()

    @visit.register(Break)
    def _(self, node: Break) -> None:
        self._write("break")
        if self.verbose and node.loop is not None:
            self._write(f"/*loop:{node.loop.loc}*/")

    @visit.register(Assign)
    def _(self, node: Assign) -> None:
        node.lhs.accept(self)
        self._write(" := ")
        node.rhs.accept(self)


def dump(node: Node, verbose: bool = False) -> str:
    """Return the source form of a tree, ending with a newline."""
    buffer = io.StringIO()
    dumper = ASTDumper(buffer, verbose)
    node.accept(dumper)
    dumper.nl()
    return buffer.getvalue()


def evaluate(node: Node) -> int:
    """Evaluate an integer expression."""
    return node.accept(Evaluator())