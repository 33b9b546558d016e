"""Message tree model and nested key resolution.

A MessageTree is either a ``Leaf`` holding display text or a ``Node`` mapping
keys to further trees. Trees are immutable once built; every composition
(``merge_over``) returns a new tree.

``resolve`` is the only place dot-path semantics are defined. Fallback,
auditing and translators all go through it.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Union

KEY_SEPARATOR = "."


@dataclass(frozen=True)
class Leaf:
    """Terminal display text."""

    text: str


@dataclass(frozen=True)
class Node:
    """Nested mapping of keys to subtrees.

    The mapping is copied and wrapped read-only on construction.
    """

    children: Mapping[str, "MessageTree"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))


MessageTree = Union[Leaf, Node]

EMPTY_TREE = Node()


class MalformedTreeError(ValueError):
    """Raw data does not describe a nested string tree.

    Attributes:
        path: Dot-path of the offending node ("" for the root).
    """

    def __init__(self, path: str, problem: str):
        self.path = path
        self.problem = problem
        location = path or "<root>"
        super().__init__(f"{location}: {problem}")


def build_tree(data: Any, _path: str = "") -> Node:
    """Build a validated Node from raw deserialized data.

    Args:
        data: Mapping whose values are strings or further mappings.

    Returns:
        Immutable Node.

    Raises:
        MalformedTreeError: On non-mapping roots, non-string keys, or leaves
            that are not strings (lists, numbers, booleans, null).
    """
    if not isinstance(data, Mapping):
        raise MalformedTreeError(_path, f"expected a mapping, got {type(data).__name__}")

    children: dict[str, MessageTree] = {}
    for key, value in data.items():
        if not isinstance(key, str):
            raise MalformedTreeError(_path, f"key {key!r} is not a string")
        child_path = f"{_path}{KEY_SEPARATOR}{key}" if _path else key
        if isinstance(value, str):
            children[key] = Leaf(value)
        elif isinstance(value, Mapping):
            children[key] = build_tree(value, child_path)
        else:
            raise MalformedTreeError(
                child_path, f"expected a string or mapping, got {type(value).__name__}"
            )
    return Node(children)


def to_dict(tree: MessageTree) -> Any:
    """Convert a tree back into plain nested dicts and strings."""
    match tree:
        case Leaf(text=text):
            return text
        case Node(children=children):
            return {key: to_dict(child) for key, child in children.items()}


def resolve(tree: MessageTree, dot_path: str) -> Optional[str]:
    """Walk a dot-path through a tree.

    Never raises. Returns None when a segment is missing, when the path runs
    past a leaf, or when the path ends on a Node.

    Args:
        tree: Tree to search.
        dot_path: Keys joined by "." (e.g., "errors.fileTooLarge").

    Returns:
        Leaf text, or None.
    """
    if not isinstance(dot_path, str) or not dot_path:
        return None

    current: Optional[MessageTree] = tree
    for segment in dot_path.split(KEY_SEPARATOR):
        match current:
            case Node(children=children):
                current = children.get(segment)
            case _:
                return None

    match current:
        case Leaf(text=text):
            return text
        case _:
            return None


def iter_leaf_paths(tree: MessageTree, _prefix: str = "") -> Iterator[str]:
    """Yield the dot-path of every leaf, depth first in key order."""
    match tree:
        case Leaf():
            if _prefix:
                yield _prefix
        case Node(children=children):
            for key, child in children.items():
                child_prefix = f"{_prefix}{KEY_SEPARATOR}{key}" if _prefix else key
                yield from iter_leaf_paths(child, child_prefix)


def merge_over(primary: MessageTree, base: MessageTree) -> MessageTree:
    """Deep structural merge of ``primary`` over ``base``.

    Where both sides hold a Node the merge recurses; otherwise whatever
    ``primary`` holds wins, and keys absent from ``primary`` come from
    ``base``. A blank primary leaf counts as absent when ``base`` has the
    key. Inputs are never modified.

    Args:
        primary: Preferred tree (e.g., the requested locale).
        base: Tree supplying anything ``primary`` lacks.

    Returns:
        New merged tree.
    """
    match (primary, base):
        case (Node(children=primary_children), Node(children=base_children)):
            merged: dict[str, MessageTree] = {}
            for key, child in primary_children.items():
                base_child = base_children.get(key)
                merged[key] = child if base_child is None else merge_over(child, base_child)
            for key, base_child in base_children.items():
                if key not in merged:
                    merged[key] = base_child
            return Node(merged)
        case (Leaf(text=""), _):
            return base
        case _:
            return primary
