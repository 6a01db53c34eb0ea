"""Adapters that turn markup or browser snapshots into Element trees."""

from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment

from .node import Element

IGNORED_TAGS = {"script", "style", "noscript", "template", "head", "meta", "link"}

# Evaluate in a page (e.g. page.evaluate(SNAPSHOT_JS, selector)) and feed the
# result to element_from_snapshot().
SNAPSHOT_JS = """
(selector) => {
  const walk = (el) => {
    const r = el.getBoundingClientRect();
    const cs = window.getComputedStyle(el);
    const attrs = {};
    for (const a of el.attributes) attrs[a.name] = a.value;
    return {
      tag: el.tagName.toLowerCase(),
      attrs,
      text: Array.from(el.childNodes)
        .filter((n) => n.nodeType === 3)
        .map((n) => n.textContent.trim())
        .filter(Boolean)
        .join(' '),
      rect: { width: r.width, height: r.height, x: r.x, y: r.y },
      style: { display: cs.display, position: cs.position, fontSize: cs.fontSize },
      children: Array.from(el.children).map(walk),
    };
  };
  const root = document.querySelector(selector || 'body');
  return root ? walk(root) : null;
}
"""


def _convert(tag: Tag) -> Element:
    attrs: Dict[str, Any] = {}
    for name, value in tag.attrs.items():
        if isinstance(value, list):
            value = " ".join(value)
        attrs[name] = value

    children: List[Any] = []
    for child in tag.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString):
            text = " ".join(str(child).split())
            if text:
                children.append(text)
        elif isinstance(child, Tag) and child.name not in IGNORED_TAGS:
            children.append(_convert(child))
    return Element(tag.name.lower(), attrs, children)


def parse_html(markup: str, parser: str = "html.parser") -> Element:
    """
    Parse an HTML fragment or document into a static (unmeasured) Element tree.

    A single top-level element is returned as-is; multiple top-level
    elements are wrapped in a synthetic <div>. A full document yields <body>.
    """
    soup = BeautifulSoup(markup or "", parser)
    root = soup.body if soup.body is not None else soup
    top: List[Tag] = [c for c in root.children if isinstance(c, Tag) and c.name not in IGNORED_TAGS]
    if root is soup.body:
        return _convert(soup.body)
    if len(top) == 1:
        return _convert(top[0])
    wrapper = Element("div")
    wrapper.children = [_convert(t) for t in top]
    return wrapper


def element_from_snapshot(data: Dict[str, Any]) -> Element:
    """
    Build a measurable Element tree from a browser snapshot (see SNAPSHOT_JS).
    """
    children: List[Any] = []
    text = (data.get("text") or "").strip()
    if text:
        children.append(text)
    for child in data.get("children") or []:
        children.append(element_from_snapshot(child))

    rect: Optional[Dict[str, Any]] = data.get("rect")
    return Element(
        kind=str(data.get("tag") or "div").lower(),
        attrs=data.get("attrs") or {},
        children=children,
        box=dict(rect) if rect is not None else None,
        style=data.get("style"),
    )
