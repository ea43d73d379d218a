"""
Nodes — узлы дерева выражения

Immutable Pydantic модели, образующие закрытое множество вариантов узла
(tagged union по полю kind):
- NumberNode — лист с числом произвольной точности
- BracketsNode — выражение в скобках вида BracketKind с поддеревом

Дерево строится парсером и только читается при вычислении; обратных
ссылок на родителя нет.
"""

from decimal import Decimal
from enum import IntEnum
from typing import Annotated, Iterator, Literal, Optional, Union

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class BracketKind(IntEnum):
    """Вид скобок. Множество закрыто; допустимость в позиции проверяет парсер."""

    PARENTHESES = 0
    SQUARE = 1
    CURLY = 2
    ABSOLUTE = 3


# =============================================================================
# NODE MODELS
# =============================================================================


class NumberNode(BaseModel):
    """Лист дерева: литерал числа."""

    kind: Literal["number"] = "number"
    number: Decimal = Field(..., description="Значение литерала")

    model_config = {"frozen": True}

    def get_number(self) -> Decimal:
        return self.number


class BracketsNode(BaseModel):
    """
    Выражение, записанное внутри скобок вида type.

    Неизвестный вид скобок отклоняется при создании (ValidationError).
    """

    kind: Literal["brackets"] = "brackets"
    type: BracketKind = Field(..., description="Вид скобок")
    child: Optional["Node"] = Field(default=None, description="Выражение внутри скобок")

    model_config = {"frozen": True}

    def get_type(self) -> BracketKind:
        return self.type


Node = Annotated[Union[NumberNode, BracketsNode], Field(discriminator="kind")]

BracketsNode.model_rebuild()


# =============================================================================
# TREE TRAVERSAL
# =============================================================================


def is_leaf(node: Node) -> bool:
    """True для узлов без поддеревьев."""
    if isinstance(node, NumberNode):
        return True
    return node.child is None


def iter_nodes(node: Node) -> Iterator[Node]:
    """Обход дерева в прямом порядке (узел, затем поддерево)."""
    yield node
    if isinstance(node, BracketsNode) and node.child is not None:
        yield from iter_nodes(node.child)
