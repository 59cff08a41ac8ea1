# Path: ixbrl_validator/models/document.py
"""
Document Tree Model

Immutable in-memory tree produced by the document parser and read by
every validation pass.

This module defines:
- Node: tag name, ordered attributes, children, text, source line
- DocumentTree: owner of the root node with lazy, predicate-based visitors

Tag and attribute names are kept as written in the markup
('ix:nonFraction', 'xlink:href'), so validators match on the qualified
names filers and reviewers actually see.

Example:
    tree = DocumentTree(root)

    for fact in tree.find_by_tag('ix:nonFraction'):
        print(fact.get('name'), fact.text_content())

    turnover = list(tree.find_by_name('uk-gaap:Turnover'))
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional

NodePredicate = Callable[['Node'], bool]


@dataclass(frozen=True, eq=False)
class Node:
    """
    Single element of a parsed document.

    Text is held the way lxml holds it: 'text' is the text before the
    first child, 'tail' the text after this element's end tag (which
    belongs to the parent's content).

    Attributes:
        tag: Qualified tag name as written ('xbrli:context', 'html')
        attributes: Ordered, read-only attribute map (namespace
            declarations appear as 'xmlns' / 'xmlns:prefix')
        children: Child element nodes in document order
        text: Leading text of this element
        tail: Text following this element inside its parent
        line: Source line number, when known
    """
    tag: str
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    children: tuple['Node', ...] = ()
    text: str = ''
    tail: str = ''
    line: Optional[int] = None

    def get(self, attribute: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value."""
        return self.attributes.get(attribute, default)

    def has(self, attribute: str) -> bool:
        """Check whether attribute is present (even if empty)."""
        return attribute in self.attributes

    @property
    def name(self) -> Optional[str]:
        """Taxonomy name carried in the 'name' attribute, if any."""
        return self.attributes.get('name')

    @property
    def label(self) -> str:
        """Taxonomy name when tagged, else the tag name."""
        return self.attributes.get('name') or self.tag

    @property
    def direct_text(self) -> str:
        """Text owned by this element itself, excluding descendants."""
        return self.text + ''.join(c.tail for c in self.children)

    def text_content(self) -> str:
        """
        Get all text inside this element, in document order.

        Returns:
            Concatenated text of this node and all descendants
        """
        parts = [self.text]
        for child in self.children:
            parts.append(child.text_content())
            parts.append(child.tail)
        return ''.join(parts)

    def iter(self) -> Iterator['Node']:
        """Iterate this node and all descendants in document (pre-)order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find_children(self, tag: str) -> list['Node']:
        """Direct children with the given tag."""
        return [c for c in self.children if c.tag == tag]

    def find_descendants(self, tag: str) -> Iterator['Node']:
        """Descendants (excluding self) with the given tag."""
        for child in self.children:
            for node in child.iter():
                if node.tag == tag:
                    yield node

    def find_first(self, tag: str) -> Optional['Node']:
        """First descendant with the given tag, or None."""
        return next(self.find_descendants(tag), None)


class DocumentTree:
    """
    Immutable parsed document.

    Every query returns a fresh lazy iterator, so a search is finite and
    restartable per call.

    Example:
        tree = DocumentTree(root)
        contexts = list(tree.find_by_tag('xbrli:context'))
        refs = [n.get('contextRef') for n in tree.find_with_attribute('contextRef')]
    """

    def __init__(self, root: Node):
        """
        Initialize document tree.

        Args:
            root: Root element node
        """
        self._root = root

    @property
    def root(self) -> Node:
        """Root element."""
        return self._root

    def iter_nodes(self, predicate: Optional[NodePredicate] = None) -> Iterator[Node]:
        """
        Lazily iterate nodes in document order.

        Args:
            predicate: Optional filter; None yields every node

        Returns:
            Iterator over matching nodes
        """
        for node in self._root.iter():
            if predicate is None or predicate(node):
                yield node

    def iter_with_ancestors(self) -> Iterator[tuple[Node, tuple[Node, ...]]]:
        """
        Iterate nodes in document order together with their ancestors.

        Returns:
            Iterator of (node, ancestors) where ancestors runs root-first
        """
        stack: list[tuple[Node, tuple[Node, ...]]] = [(self._root, ())]
        while stack:
            node, ancestors = stack.pop()
            yield node, ancestors
            child_ancestors = ancestors + (node,)
            stack.extend((c, child_ancestors) for c in reversed(node.children))

    def find_by_tag(self, tag: str) -> Iterator[Node]:
        """Nodes with the given qualified tag name."""
        return self.iter_nodes(lambda n: n.tag == tag)

    def find_by_name(self, name: str) -> Iterator[Node]:
        """Nodes whose 'name' attribute equals the given taxonomy name."""
        return self.iter_nodes(lambda n: n.get('name') == name)

    def find_with_attribute(self, attribute: str) -> Iterator[Node]:
        """Nodes carrying the given attribute."""
        return self.iter_nodes(lambda n: n.has(attribute))

    def has_name(self, name: str) -> bool:
        """Whether any node carries the given taxonomy name."""
        return next(self.find_by_name(name), None) is not None

    def count(self, predicate: Optional[NodePredicate] = None) -> int:
        """Count matching nodes."""
        return sum(1 for _ in self.iter_nodes(predicate))

    def __repr__(self) -> str:
        return f"DocumentTree(root={self._root.tag!r})"


__all__ = ['Node', 'NodePredicate', 'DocumentTree']
