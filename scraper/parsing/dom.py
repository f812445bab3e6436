"""
Read-only document tree used by the extractor.

BeautifulSoup (lxml backend) does the tolerant parsing; the result is copied
into immutable ``Node`` objects so extraction can be written as plain
functions over ``tag_name``/``attributes``/``children``/``text_content``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from bs4 import (
    BeautifulSoup,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)
from loguru import logger


DOCUMENT_TAG = "#document"
DEFAULT_STRIPPED_TAGS = ("script", "style")

# markup constructs that never contribute visible text
_SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


@dataclass(frozen=True)
class Node:
    tag_name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: Tuple[Union["Node", str], ...] = ()

    @property
    def element_children(self) -> Tuple["Node", ...]:
        return tuple(child for child in self.children if isinstance(child, Node))

    @property
    def text_content(self) -> str:
        """Concatenated text of every descendant text node, in document order."""
        parts: List[str] = []
        stack: List[Union[Node, str]] = [self]
        while stack:
            current = stack.pop()
            if isinstance(current, str):
                parts.append(current)
            else:
                stack.extend(reversed(current.children))
        return "".join(parts)

    def get(self, name: str, default: str = "") -> str:
        return self.attributes.get(name.lower(), default)

    def has_attr(self, name: str) -> bool:
        return name.lower() in self.attributes

    def iter(self) -> Iterator["Node"]:
        """Yield descendant elements in document order (pre-order), excluding self."""
        stack: List[Node] = list(reversed(self.element_children))
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.element_children))

    def find_all(self, *tag_names: str) -> List["Node"]:
        wanted = {name.lower() for name in tag_names}
        return [node for node in self.iter() if node.tag_name in wanted]

    def find(self, tag_name: str) -> Optional["Node"]:
        wanted = tag_name.lower()
        return next((node for node in self.iter() if node.tag_name == wanted), None)


def empty_document() -> Node:
    return Node(DOCUMENT_TAG)


def _attributes(tag: Tag) -> Dict[str, str]:
    attrs: Dict[str, str] = {}
    for name, value in tag.attrs.items():
        # bs4 returns multi-valued attributes such as class as lists
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        attrs[name.lower()] = "" if value is None else str(value)
    return attrs


def _to_node(root: Tag, stripped: frozenset) -> Node:
    # iterative walk; deeply nested markup must not hit the recursion limit
    pending: List[Tuple[Tag, Iterator, List[Union[Node, str]]]] = [
        (root, iter(root.children), [])
    ]
    while True:
        current, children_iter, children = pending[-1]
        child = next(children_iter, None)

        if child is None:
            pending.pop()
            if isinstance(current, BeautifulSoup):
                node = Node(DOCUMENT_TAG, {}, tuple(children))
            else:
                node = Node(current.name.lower(), _attributes(current), tuple(children))
            if not pending:
                return node
            pending[-1][2].append(node)
            continue

        if isinstance(child, Tag):
            if child.name.lower() in stripped:
                continue
            pending.append((child, iter(child.children), []))
        elif isinstance(child, NavigableString) and not isinstance(child, _SKIPPED_STRINGS):
            children.append(str(child))


def parse_document(html: str, strip: Iterable[str] = DEFAULT_STRIPPED_TAGS) -> Node:
    """Parse markup into a ``Node`` tree with the ``strip`` elements removed.

    Never raises: empty input or markup the parser rejects gives an empty
    document, so callers see empty fields rather than an error.
    """
    if not html or not html.strip():
        return empty_document()

    try:
        soup = BeautifulSoup(html, "lxml")
        return _to_node(soup, frozenset(name.lower() for name in strip))
    except Exception as exc:
        logger.warning(f"Could not parse markup ({len(html)} chars), using empty document: {exc}")
        return empty_document()
