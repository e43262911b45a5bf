"""
Immutable document and element models backed by selectolax (lexbor backend).

A Document keeps the parsed tree private and hands out Element snapshots, so
nothing a caller receives can modify the parsed markup.
"""

from dataclasses import dataclass, field
from typing import Optional

from selectolax.lexbor import LexborHTMLParser, LexborNode

from ..errors import MarkupError


@dataclass(frozen=True)
class Element:
    """Snapshot of a single node reached through a tag-name query."""
    tag: str
    attrs: tuple[tuple[str, Optional[str]], ...] = ()
    text: str = ""

    @property
    def attributes(self) -> dict[str, Optional[str]]:
        """Attributes as a fresh dictionary."""
        return dict(self.attrs)

    def attr(self, name: str) -> Optional[str]:
        """Value of an attribute, None if absent or valueless."""
        for key, value in self.attrs:
            if key == name:
                return value
        return None

    @classmethod
    def from_node(cls, node: LexborNode) -> "Element":
        """Build a snapshot from a selectolax node."""
        return cls(
            tag=node.tag,
            attrs=tuple(node.attributes.items()),
            text=node.text(strip=True),
        )


@dataclass(frozen=True)
class Document:
    """Parsed markup with descendant queries by tag name."""
    source: str
    markup: str = field(repr=False)
    _tree: LexborHTMLParser = field(repr=False, compare=False)

    def descendants(self, tag_name: str) -> tuple[Element, ...]:
        """All elements with the given tag, in document order."""
        return tuple(Element.from_node(node) for node in self._tree.tags(tag_name.lower()))

    @property
    def title(self) -> Optional[str]:
        """Text of the first <title> element, None when missing."""
        titles = self.descendants("title")
        return titles[0].text if titles else None


def parse_markup(markup: str, source: str = "<string>") -> Document:
    """
    Parse markup text into a Document.

    Args:
        markup: Raw HTML text
        source: Descriptor recorded on the document and on errors

    Returns:
        Parsed document

    Raises:
        MarkupError: If the text is empty or cannot be parsed
    """
    if not isinstance(markup, str):
        raise MarkupError(f"Markup must be text, got {type(markup).__name__}", source=source)

    if not markup.strip():
        raise MarkupError("Markup is empty", source=source)

    try:
        tree = LexborHTMLParser(markup)
    except Exception as e:
        raise MarkupError(f"Markup could not be parsed: {e}", source=source, cause=e) from e

    return Document(source=source, markup=markup, _tree=tree)
