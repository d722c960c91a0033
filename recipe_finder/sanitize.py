"""
Sanitisation of rich text returned by the recipe API.

Spoonacular returns `instructions` and `summary` as HTML fragments written by third
parties. They are never rendered as trusted markup: on ingest the HTML is parsed with
BeautifulSoup and reduced to plain text, which the UI then renders escaped.

- Block boundaries (<li>, <p>, <br>, <div>, <ol>/<ul>) become line breaks
- Every other tag is dropped; only its text survives
- <script> and <style> contents are removed entirely
"""

import re
from typing import List, Optional

from bs4 import BeautifulSoup

_BLOCK_TAGS = ["li", "p", "div", "ol", "ul", "h1", "h2", "h3", "h4", "h5", "h6", "tr"]
_DROP_TAGS = ["script", "style", "iframe", "object", "embed", "noscript"]

# Leading "1." / "2)" / "Step 3:" numbering; the UI adds its own numbers
_STEP_PREFIX = re.compile(r"^\s*(?:step\s*)?\d+\s*[.):-](?!\d)\s*", re.IGNORECASE)

# Characters that Markdown would interpret when the text is rendered
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]<>()#+|!~])")


def _text_lines(html: Optional[str]) -> List[str]:
    if not html:
        return []
    soup = BeautifulSoup(html, features="html.parser")
    for tag in soup.find_all(_DROP_TAGS):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.insert_before("\n")
        tag.insert_after("\n")
    text = soup.get_text()
    lines = [" ".join(line.split()) for line in text.splitlines()]
    return [line for line in lines if line]


def plain_text(html: Optional[str]) -> str:
    """
    Reduce an HTML fragment to plain text.

    Args:
        html: HTML fragment from the API (may be None or empty)

    Returns:
        Text with block boundaries turned into newlines; "" for empty input
    """
    return "\n".join(_text_lines(html))


def instruction_steps(html: Optional[str]) -> List[str]:
    """
    Split recipe instructions into ordered steps.

    Each list item or paragraph becomes one step. Unstructured text (no block tags)
    becomes a single step per line. Leading numbering is stripped.

    Args:
        html: `instructions` field from the API

    Returns:
        Non-empty step strings, in order
    """
    steps = []
    for line in _text_lines(html):
        step = _STEP_PREFIX.sub("", line).strip()
        if step:
            steps.append(step)
    return steps


def escape_markdown(text: str) -> str:
    """Escape Markdown control characters so text renders literally in st.markdown."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)
