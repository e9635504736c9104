"""Tiger language syntax trees: symbols, locations, errors, nodes, dumping and evaluation."""

__version__ = "0.1.0"
__all__ = ["symbols", "location", "errors", "nodes", "ast_dumper"]