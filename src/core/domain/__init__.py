"""
Domain models and value objects.

Contains the expression tree node variants: NumberNode, BracketsNode.
"""

from src.core.domain.nodes import (
    BracketKind,
    BracketsNode,
    Node,
    NumberNode,
    is_leaf,
    iter_nodes,
)

__all__ = [
    # Node models
    "Node",
    "NumberNode",
    "BracketsNode",
    "BracketKind",
    # Traversal
    "is_leaf",
    "iter_nodes",
]
