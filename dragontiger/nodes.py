"""Abstract syntax tree of the Tiger language."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from dragontiger.location import Location
from dragontiger.symbols import Symbol


class Type(enum.Enum):
    UNDEF = 0
    INT = 1
    STRING = 2
    VOID = 3


class Operator(enum.Enum):
    """Binary operators; the value is the operator's source spelling."""

    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDE = "/"
    EQ = "="
    NEQ = "<>"
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="


class _SetOnce:
    """An attribute that starts unset and may be assigned exactly once."""

    def __init__(self, unset: Any) -> None:
        self.unset = unset

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.slot = f"_{name}_value"

    def __get__(self, obj: Any, objtype: Any = None) -> Any:
        if obj is None:
            return self
        return obj.__dict__.get(self.slot, self.unset)

    def __set__(self, obj: Any, value: Any) -> None:
        if value == self.unset:
            raise ValueError(f"cannot set {self.name} to its unset value")
        if self.slot in obj.__dict__:
            raise ValueError(f"{self.name} is already set")
        obj.__dict__[self.slot] = value


@dataclass(eq=False)
class Node:
    """Base of all AST nodes."""

    loc: Location

    type = _SetOnce(Type.UNDEF)

    def accept(self, visitor: Any) -> Any:
        """Let the visitor process this node and return its result."""
        return visitor.visit(self)


@dataclass(eq=False)
class Expr(Node):
    pass


@dataclass(eq=False)
class Decl(Node):
    name: Symbol
    type_name: Optional[Symbol]

    depth = _SetOnce(-1)


@dataclass(eq=False)
class IntegerLiteral(Expr):
    value: int


@dataclass(eq=False)
class StringLiteral(Expr):
    value: Symbol


@dataclass(eq=False)
class BinaryOperator(Expr):
    left: Expr
    right: Expr
    op: Operator


@dataclass(eq=False)
class Sequence(Expr):
    exprs: list[Expr]


@dataclass(eq=False)
class Let(Expr):
    decls: list[Decl]
    sequence: Sequence


@dataclass(eq=False)
class Identifier(Expr):
    name: Symbol

    decl = _SetOnce(None)
    depth = _SetOnce(-1)


@dataclass(eq=False)
class IfThenElse(Expr):
    condition: Expr
    then_part: Expr
    else_part: Expr


@dataclass(eq=False)
class VarDecl(Decl):
    expr: Optional[Expr]
    read_only: bool = False
    escapes: bool = field(default=False, init=False)


@dataclass(eq=False)
class FunDecl(Decl):
    params: list[VarDecl]
    expr: Optional[Expr]
    is_external: bool = False
    escaping_decls: list[VarDecl] = field(default_factory=list, init=False)

    external_name = _SetOnce(Symbol())
    parent = _SetOnce(None)


@dataclass(eq=False)
class FunCall(Expr):
    args: list[Expr]
    func_name: Symbol

    decl = _SetOnce(None)
    depth = _SetOnce(-1)


@dataclass(eq=False)
class Loop(Expr):
    pass


@dataclass(eq=False)
class WhileLoop(Loop):
    condition: Expr
    body: Expr


@dataclass(eq=False)
class ForLoop(Loop):
    variable: VarDecl
    high: Expr
    body: Expr


@dataclass(eq=False)
class Break(Expr):
    loop = _SetOnce(None)


@dataclass(eq=False)
class Assign(Expr):
    lhs: Identifier
    rhs: Expr