"""
Legacy HTML response parsing (Mode B).

Older Sendy installations answer /subscribe, /unsubscribe and the subscriber
API with small HTML pages instead of plain text. The page is converted into an
HtmlNode tree and a Selector picks the node holding the status message.

Selectors are declarative paths from the root element. Each step is either:
- a tag name: first direct child with that tag
- an int: n-th direct child (elements and comments count, text does not)

Positional steps break as soon as the service changes its markup. A miss is
reported as HtmlStructureError so callers can degrade instead of crashing.
"""

import logging
from dataclasses import dataclass
from typing import Union

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from sendy.errors import HtmlStructureError
from sendy.models import HtmlNode

logger = logging.getLogger(__name__)

# Non-text, non-element nodes are kept as children under these tags
SPECIAL_NODE_TAGS = (
    (Comment, "#comment"),
    (Doctype, "#doctype"),
    (Declaration, "#declaration"),
    (ProcessingInstruction, "#pi"),
)

SelectorStep = Union[str, int]


def parse_html(markup: str) -> HtmlNode:
    """
    Parse markup and return the tree rooted at its first top-level element.

    Raises:
        HtmlStructureError: markup rejected by the parser or no element found
    """
    try:
        soup = BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup as e:
        raise HtmlStructureError(f"Markup rejected by parser: {e}") from e

    for item in soup.contents:
        if isinstance(item, Tag):
            return _convert(item)
    raise HtmlStructureError("No element found in response body")


def _convert(tag: Tag) -> HtmlNode:
    node = HtmlNode(tag=tag.name, attributes=_attributes(tag))
    texts = []
    for item in tag.children:
        if isinstance(item, Tag):
            node.children.append(_convert(item))
        elif isinstance(item, CData):
            texts.append(str(item))
        elif isinstance(item, NavigableString):
            special = _special_tag(item)
            if special:
                node.children.append(HtmlNode(tag=special, text=str(item)))
            else:
                texts.append(str(item))
    if texts:
        node.text = "".join(texts)
    return node


def _attributes(tag: Tag) -> dict[str, str]:
    attrs = {}
    for name, value in tag.attrs.items():
        # class, rel, ... llegan como lista
        attrs[name] = " ".join(value) if isinstance(value, list) else str(value)
    return attrs


def _special_tag(item: NavigableString):
    for node_type, name in SPECIAL_NODE_TAGS:
        if isinstance(item, node_type):
            return name
    return None


@dataclass(frozen=True)
class Selector:
    """Path from the root element to a single node."""

    name: str
    steps: tuple[SelectorStep, ...]

    def select(self, root: HtmlNode) -> HtmlNode:
        """
        Walk the steps from root.

        Raises:
            HtmlStructureError: a step found no matching child
        """
        node = root
        walked = [root.tag]
        for step in self.steps:
            if isinstance(step, int):
                found = node.child(step)
                label = f"[{step}]"
            else:
                found = node.find_child(step)
                label = step
            if found is None:
                raise HtmlStructureError(
                    f"Selector '{self.name}' failed at {'/'.join(walked)} -> {label} "
                    f"({len(node.children)} children)"
                )
            node = found
            walked.append(label)
        return node

    def select_text(self, root: HtmlNode, strip: bool = True) -> str:
        """Text of the selected node, stripped unless strip=False. Missing text is an error."""
        node = self.select(root)
        if node.text is None:
            raise HtmlStructureError(f"Selector '{self.name}' matched <{node.tag}> without text")
        return node.text.strip() if strip else node.text
