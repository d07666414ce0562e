"""Namespace prefixes used by generated WordprocessingML parts."""

from typing import Dict, Iterable, List

from wordml_tree.tree.node import XmlNode

WORDML_NAMESPACES: Dict[str, str] = {
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
    "wp": "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing",
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "pic": "http://schemas.openxmlformats.org/drawingml/2006/picture",
}

# Reserved by XML itself and never declared.
RESERVED_PREFIXES = ("xml", "xmlns")


def _prefix(name: str) -> str:
    return name.split(":", 1)[0] if ":" in name else ""


def collect_prefixes(root: XmlNode) -> List[str]:
    """Return namespace prefixes used in the subtree, in first-use order.

    Both element tags and attribute names are scanned; the reserved ``xml``
    and ``xmlns`` prefixes and unprefixed names are skipped, as are prefixes
    a node already declares itself.
    """
    seen: List[str] = []
    for node in root.iter():
        declared = {name.split(":", 1)[1] for name in node.attributes if name.startswith("xmlns:")}
        for name in [node.tag, *node.attributes]:
            prefix = _prefix(name)
            if (
                prefix
                and prefix not in RESERVED_PREFIXES
                and prefix not in declared
                and prefix not in seen
            ):
                seen.append(prefix)
    return seen


def namespace_declarations(
    prefixes: Iterable[str], namespaces: Dict[str, str] = WORDML_NAMESPACES
) -> Dict[str, str]:
    """Map each prefix to its ``xmlns:prefix`` attribute.

    Raises:
        KeyError: If a prefix has no known namespace URI
    """
    declarations: Dict[str, str] = {}
    for prefix in prefixes:
        if prefix not in namespaces:
            raise KeyError(f"No namespace URI registered for prefix '{prefix}'")
        declarations[f"xmlns:{prefix}"] = namespaces[prefix]
    return declarations
