# dragontiger

Building blocks for a compiler front end for the Tiger language: an
abstract syntax tree, a pretty-printer that writes a tree back as Tiger
source, and an evaluator for integer expressions.

## Modules

- `dragontiger.symbols` – `Symbol`, an interned string. Symbols made from
  equal strings share one stored string, so `==` is an identity check.
  `Symbol()` is the null symbol: `str()` gives `<null>` and its `text`
  property raises `ValueError`; `is_null` tells the two apart.
- `dragontiger.location` – `Location(filename, line, column)`, a frozen
  dataclass printed as `filename:line.column`, and `NO_LOCATION`
  (`<none>:0.0`) for things that have no place in the source.
- `dragontiger.errors` – `TigerError`, an exception carrying a `message` and
  an optional `location` (printed as `location: message`);
  `error(message, location=None)` raises it, and
  `non_fatal_error(message, location=None)` writes the same text to standard
  error and returns.
- `dragontiger.nodes` – the tree, as dataclasses: `IntegerLiteral`,
  `StringLiteral`, `BinaryOperator`, `Sequence`, `Let`, `Identifier`,
  `IfThenElse`, `VarDecl`, `FunDecl`, `FunCall`, `WhileLoop`, `ForLoop`,
  `Break` and `Assign`, on the bases `Node`, `Expr`, `Decl` and `Loop`, with
  the enums `Type` (`UNDEF`, `INT`, `STRING`, `VOID`) and `Operator` (whose
  values are the spellings `+ - * / = <> < <= > >=`). Every node has a `loc`
  and `accept(visitor)`, which returns `visitor.visit(node)`. The attributes
  filled in by later analysis — `type`, `depth`, `decl`, `external_name`,
  `parent`, `loop` — may each be assigned once; assigning again, or assigning
  the unset value, raises `ValueError`.
- `dragontiger.ast_dumper` – two visitors and two helpers:
  - `ASTDumper(stream, verbose=False)` writes a tree to a text stream as
    indented Tiger source; `nl()` starts a new line at the current
    indentation. In verbose mode it adds comments showing the declaration a
    resolved identifier or call refers to, depth differences, the loop a
    `break` belongs to, external function names, and `/*e*/` on escaping
    variables.
  - `Evaluator` computes the value of expressions made of integer literals,
    `+ - * /`, the comparisons `= < <= > >=` (giving 1 or 0), sequences and
    `if`/`then`/`else`. Results wrap to signed 32 bits and division
    truncates toward zero. Division by zero, an empty sequence, the `<>`
    operator and every other kind of node (strings, identifiers, `let`,
    calls, loops, `break`, assignments, declarations) raise `TigerError`.
  - `dump(node, verbose=False)` returns the dumped text, ending with a
    newline; `evaluate(node)` returns the evaluator's result.

## Example

```python
from dragontiger.ast_dumper import dump, evaluate
from dragontiger.location import NO_LOCATION as loc
from dragontiger.nodes import BinaryOperator, IntegerLiteral, Operator

tree = BinaryOperator(
    loc,
    BinaryOperator(loc, IntegerLiteral(loc, 3), IntegerLiteral(loc, 4), Operator.PLUS),
    IntegerLiteral(loc, 2),
    Operator.TIMES,
)

dump(tree)      # '((3+4)*2)\n'
evaluate(tree)  # 14
```

## What it does not do

There is no lexer or parser and no command-line program: trees are built in
Python from the classes in `dragontiger.nodes`. There is no name binding,
type checking or code generation either; the attributes those stages would
fill in are there to be set by the caller.