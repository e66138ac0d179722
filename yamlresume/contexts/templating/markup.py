"""
Summary markup: a small Markdown subset compiled to LaTeX or HTML.

Summaries are written in Markdown. MarkdownParser turns one into a tree of
Node objects (doc, paragraph, bulletList, orderedList, listItem, text) where
text nodes carry bold/italic/link marks; a code generator then walks the
tree and emits the target markup.

Parsing goes through the markdown library and BeautifulSoup, the same pair
used for Markdown conversion elsewhere. Raw HTML (and the ">" of a block
quote) is escaped first and survives as literal text. Block elements outside
the subset (headings, code blocks, rules) are dropped; inline code keeps its
text.

Nested lists follow Python-Markdown's indentation rule (four spaces).
"""

import re
from dataclasses import dataclass, field
from html import escape
from typing import List, Optional, Protocol, Tuple

import markdown
from bs4 import BeautifulSoup, NavigableString, Tag

from yamlresume.contexts.templating.escaping import Escaper, escape_html, escape_latex

BOLD_TAGS = ("strong",)
ITALIC_TAGS = ("em",)
LIST_TAGS = {"ul": "bulletList", "ol": "orderedList"}

LIST_LINE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+")


@dataclass(frozen=True)
class Mark:
    """Inline formatting on a text node; href is set for links only."""

    type: str
    href: Optional[str] = None


@dataclass
class Node:
    """
    One node of a parsed summary.

    Attributes:
        type: doc, paragraph, bulletList, orderedList, listItem or text
        content: Child nodes (empty for text nodes)
        text: Text of a text node
        marks: Marks applied to a text node, outermost first
    """

    type: str
    content: List["Node"] = field(default_factory=list)
    text: str = ""
    marks: Tuple[Mark, ...] = ()


class SummaryParser(Protocol):
    def parse(self, text: str) -> Node: ...


class CodeGenerator(Protocol):
    def generate(self, node: Node) -> str: ...


def separate_lists(text: str) -> str:
    """
    Put a blank line between a paragraph and a list that directly follows it.

    Python-Markdown only starts a list after a blank line, while resume
    authors routinely write a lead-in line straight above the bullets.
    """
    lines = text.split("\n")
    result: List[str] = []

    for line in lines:
        if result and LIST_LINE.match(line):
            previous = result[-1]
            if previous.strip() and not LIST_LINE.match(previous) and not previous.startswith(" "):
                result.append("")
        result.append(line)

    return "\n".join(result)


class MarkdownParser:
    """Parse a Markdown summary into a Node tree."""

    def parse(self, text: str) -> Node:
        if not text or not text.strip():
            return Node("doc")

        # Summaries are Markdown only, raw HTML is kept as literal text
        html = markdown.markdown(separate_lists(escape(text, quote=False)))
        soup = BeautifulSoup(html, "html.parser")
        return Node("doc", content=self._blocks(soup))

    def _blocks(self, element: Tag) -> List[Node]:
        nodes: List[Node] = []
        for child in element.children:
            if not isinstance(child, Tag):
                continue
            if child.name == "p":
                nodes.append(Node("paragraph", content=_trim(self._inline(child, ()))))
            elif child.name in LIST_TAGS:
                nodes.append(self._list(child))
        return nodes

    def _list(self, element: Tag) -> Node:
        items = [self._list_item(child) for child in element.find_all("li", recursive=False)]
        return Node(LIST_TAGS[element.name], content=items)

    def _list_item(self, element: Tag) -> Node:
        content: List[Node] = []
        run: List[Node] = []

        def flush() -> None:
            inline = _trim(run)
            if inline:
                content.append(Node("paragraph", content=inline))
            run.clear()

        for child in element.children:
            if isinstance(child, Tag) and child.name == "p":
                flush()
                content.append(Node("paragraph", content=_trim(self._inline(child, ()))))
            elif isinstance(child, Tag) and child.name in LIST_TAGS:
                flush()
                content.append(self._list(child))
            else:
                run.extend(self._inline_node(child, ()))
        flush()

        return Node("listItem", content=content)

    def _inline(self, element: Tag, marks: Tuple[Mark, ...]) -> List[Node]:
        nodes: List[Node] = []
        for child in element.children:
            nodes.extend(self._inline_node(child, marks))
        return nodes

    def _inline_node(self, child, marks: Tuple[Mark, ...]) -> List[Node]:
        if isinstance(child, NavigableString):
            text = str(child)
            return [Node("text", text=text, marks=marks)] if text else []

        if child.name in BOLD_TAGS:
            return self._inline(child, marks + (Mark("bold"),))
        if child.name in ITALIC_TAGS:
            return self._inline(child, marks + (Mark("italic"),))
        if child.name == "a":
            return self._inline(child, marks + (Mark("link", href=child.get("href", "")),))
        if child.name == "br":
            return [Node("text", text="\n", marks=marks)]

        # code, span and other inline wrappers keep their text
        return self._inline(child, marks)


def _trim(nodes: List[Node]) -> List[Node]:
    """Strip whitespace at the edges of an inline run, dropping emptied nodes."""
    nodes = list(nodes)

    while nodes and nodes[0].type == "text" and not nodes[0].text.strip():
        nodes.pop(0)
    while nodes and nodes[-1].type == "text" and not nodes[-1].text.strip():
        nodes.pop()

    if nodes and nodes[0].type == "text":
        first = nodes[0]
        nodes[0] = Node("text", text=first.text.lstrip(), marks=first.marks)
    if nodes and nodes[-1].type == "text":
        last = nodes[-1]
        nodes[-1] = Node("text", text=last.text.rstrip(), marks=last.marks)

    return nodes


class LatexCodeGenerator:
    """
    Emit LaTeX for a Node tree.

    Paragraphs end in a blank line, lists become itemize/enumerate
    environments, links become \\href (optionally underlined).
    """

    def __init__(self, escaper: Escaper = escape_latex, underline_links: bool = False):
        self.escaper = escaper
        self.underline_links = underline_links

    def generate(self, node: Node) -> str:
        if node.type == "doc":
            return self._fragment(node.content)
        if node.type == "bulletList":
            return f"\\begin{{itemize}}\n{self._fragment(node.content)}\\end{{itemize}}\n"
        if node.type == "orderedList":
            return f"\\begin{{enumerate}}\n{self._fragment(node.content)}\\end{{enumerate}}\n"
        if node.type == "listItem":
            # a paragraph break right after \item would end the item's first line
            return "\\item " + self._fragment(node.content).replace("\n\n", "\n", 1)
        if node.type == "paragraph":
            if not node.content:
                return "\n"
            return f"{self._fragment(node.content)}\n\n"
        if node.type == "text":
            return self._text(node)
        raise ValueError(f"Unknown node type: {node.type}")

    def _fragment(self, nodes: List[Node]) -> str:
        return "".join(self.generate(child) for child in nodes)

    def _text(self, node: Node) -> str:
        text = self.escaper(node.text)
        for mark in node.marks:
            if mark.type == "bold":
                text = f"\\textbf{{{text}}}"
            elif mark.type == "italic":
                text = f"\\textit{{{text}}}"
            elif mark.type == "link":
                if self.underline_links:
                    text = f"\\href{{{mark.href}}}{{\\underline{{{text}}}}}"
                else:
                    text = f"\\href{{{mark.href}}}{{{text}}}"
        return text


class HtmlCodeGenerator:
    """Emit HTML for a Node tree."""

    def __init__(self, escaper: Escaper = escape_html):
        self.escaper = escaper

    def generate(self, node: Node) -> str:
        if node.type == "doc":
            return self._fragment(node.content)
        if node.type == "bulletList":
            return f"<ul>{self._fragment(node.content)}</ul>"
        if node.type == "orderedList":
            return f"<ol>{self._fragment(node.content)}</ol>"
        if node.type == "listItem":
            return f"<li>{self._fragment(node.content)}</li>"
        if node.type == "paragraph":
            return f"<p>{self._fragment(node.content)}</p>"
        if node.type == "text":
            return self._text(node)
        raise ValueError(f"Unknown node type: {node.type}")

    def _fragment(self, nodes: List[Node]) -> str:
        return "".join(self.generate(child) for child in nodes)

    def _text(self, node: Node) -> str:
        text = self.escaper(node.text)
        for mark in node.marks:
            if mark.type == "bold":
                text = f"<strong>{text}</strong>"
            elif mark.type == "italic":
                text = f"<em>{text}</em>"
            elif mark.type == "link":
                text = f'<a href="{escape_html(mark.href or "#")}">{text}</a>'
        return text
