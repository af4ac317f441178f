"""Tokenizer for the markdown-rendered page body.

Produces typed nodes (headings, images, links) in document order so the
category analyzers never scan the raw text with ad hoc patterns.
"""

import re
from dataclasses import dataclass

# A linked image: [![alt](src)](href)
LINKED_IMAGE_RE = re.compile(
    r"\[!\[(?P<alt>[^\]]*)\]\((?P<src>[^)]+)\)\]\((?P<href>[^)]+)\)"
)
IMAGE_RE = re.compile(r"!\[(?P<alt>[^\]]*)\]\((?P<src>[^)]+)\)")
LINK_RE = re.compile(r"\[(?P<text>[^\]]*)\]\((?P<href>[^)]+)\)")

HEADING_RE = re.compile(r"^(?P<hashes>#{1,6})[ \t]+(?P<text>.*\S)")
FENCE_RE = re.compile(r"^\s*(```|~~~)")


@dataclass(frozen=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True)
class Image:
    alt: str
    url: str

    @property
    def has_alt(self) -> bool:
        return len(self.alt) > 0


@dataclass(frozen=True)
class Link:
    text: str
    url: str


Node = Heading | Image | Link


@dataclass(frozen=True)
class MarkdownDocument:
    """Typed view over a tokenized page body."""

    nodes: tuple[Node, ...]

    @property
    def headings(self) -> list[Heading]:
        return [node for node in self.nodes if isinstance(node, Heading)]

    @property
    def images(self) -> list[Image]:
        return [node for node in self.nodes if isinstance(node, Image)]

    @property
    def links(self) -> list[Link]:
        return [node for node in self.nodes if isinstance(node, Link)]


def tokenize(content: str) -> MarkdownDocument:
    """Split a markdown body into heading, image and link nodes."""
    nodes: list[Node] = []
    in_fence = False

    for line in content.splitlines():
        if FENCE_RE.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        heading = HEADING_RE.match(line)
        if heading:
            nodes.append(
                Heading(level=len(heading.group("hashes")), text=heading.group("text").strip())
            )

        nodes.extend(_inline_nodes(line))

    return MarkdownDocument(nodes=tuple(nodes))


def _inline_nodes(line: str) -> list[Node]:
    """Extract images and links from one line, left to right."""
    found: list[Node] = []
    pos = 0

    while pos < len(line):
        candidates = [
            (match, kind)
            for kind, pattern in (
                ("linked_image", LINKED_IMAGE_RE),
                ("image", IMAGE_RE),
                ("link", LINK_RE),
            )
            if (match := pattern.search(line, pos))
        ]
        if not candidates:
            break

        # Earliest match wins; on a tie the more specific pattern (listed first)
        match, kind = min(candidates, key=lambda item: item[0].start())

        if kind == "linked_image":
            alt = match.group("alt")
            found.append(Image(alt=alt, url=match.group("src").strip()))
            found.append(Link(text=alt, url=match.group("href").strip()))
        elif kind == "image":
            # An image is also a link to its source
            alt = match.group("alt")
            src = match.group("src").strip()
            found.append(Image(alt=alt, url=src))
            found.append(Link(text=alt, url=src))
        else:
            found.append(Link(text=match.group("text"), url=match.group("href").strip()))

        pos = match.end()

    return found
