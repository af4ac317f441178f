"""HTML to markdown-like body and metadata extraction."""

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

DROPPED_TAGS = ["script", "style", "noscript", "template", "svg", "iframe", "head"]
HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
BLOCK_TAGS = {
    "address",
    "article",
    "aside",
    "blockquote",
    "body",
    "dd",
    "details",
    "div",
    "dl",
    "dt",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form",
    "header",
    "hr",
    "main",
    "nav",
    "ol",
    "p",
    "pre",
    "section",
    "summary",
    "table",
    "tbody",
    "td",
    "tfoot",
    "th",
    "thead",
    "tr",
    "ul",
}

# metadata key -> (attribute, value) of the <meta> tag carrying it
META_TAGS = {
    "description": ("name", "description"),
    "keywords": ("name", "keywords"),
    "ogTitle": ("property", "og:title"),
    "ogDescription": ("property", "og:description"),
    "ogImage": ("property", "og:image"),
}


def _collapse(text: str) -> str:
    return " ".join(text.split())


def _label(text: str) -> str:
    """Link/alt text safe to put between square brackets."""
    return _collapse(text.replace("[", "").replace("]", ""))


def _target(url: str) -> str:
    """URL safe to put between parentheses."""
    return url.strip().replace(" ", "%20").replace("(", "%28").replace(")", "%29")


def extract_metadata(soup: BeautifulSoup) -> dict[str, str]:
    """Read title, description, keywords and Open Graph fields."""
    metadata = {}

    title_tag = soup.find("title")
    if title_tag:
        title = _collapse(title_tag.get_text())
        if title:
            metadata["title"] = title

    for key, (attribute, value) in META_TAGS.items():
        tag = soup.find("meta", attrs={attribute: value})
        content = tag.get("content", "").strip() if tag else ""
        if content:
            metadata[key] = content

    return metadata


class _MarkdownRenderer:
    """Walks the DOM and emits one markdown block per heading, list item or paragraph."""

    def __init__(self):
        self.blocks: list[str] = []
        self.buffer: list[str] = []

    def render(self, root: Tag) -> str:
        self._walk(root)
        self._flush()
        return "\n\n".join(self.blocks)

    def _flush(self) -> None:
        text = _collapse("".join(self.buffer))
        if text:
            self.blocks.append(text)
        self.buffer = []

    def _walk(self, node: Tag) -> None:
        for child in node.children:
            if isinstance(child, Comment):
                continue
            if isinstance(child, NavigableString):
                self.buffer.append(str(child))
                continue
            if not isinstance(child, Tag):
                continue

            if child.name in HEADING_TAGS:
                self._flush()
                text = _collapse(self._inline(child))
                if text:
                    self.blocks.append(f"{'#' * int(child.name[1])} {text}")
            elif child.name == "li":
                self._flush()
                self.buffer.append("- ")
                self._walk(child)
                self._flush()
            elif child.name in BLOCK_TAGS:
                self._flush()
                self._walk(child)
                self._flush()
            else:
                self.buffer.append(self._inline(child))

    def _inline(self, node) -> str:
        if isinstance(node, Comment):
            return ""
        if isinstance(node, NavigableString):
            return str(node)
        if not isinstance(node, Tag):
            return ""

        if node.name == "img":
            src = node.get("src", "").strip()
            if not src:
                return ""
            return f"![{_label(node.get('alt', ''))}]({_target(src)})"

        if node.name == "br":
            return " "

        if node.name == "a" and node.get("href", "").strip():
            return self._anchor(node)

        return "".join(self._inline(child) for child in node.children)

    def _anchor(self, node: Tag) -> str:
        href = _target(node["href"])
        text = _label(node.get_text())
        images = [image for image in map(self._inline, node.find_all("img")) if image]

        # A bare linked image keeps the [![alt](src)](href) form
        if not text and len(images) == 1:
            return f"[{images[0]}]({href})"

        return "".join(f"{image} " for image in images) + f"[{text}]({href})"


def html_to_markdown(soup: BeautifulSoup) -> str:
    """Render the page body as markdown the tokenizer understands."""
    for tag in soup.find_all(DROPPED_TAGS):
        tag.decompose()

    root = soup.body or soup
    return _MarkdownRenderer().render(root)
