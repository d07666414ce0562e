"""Inline pictures.

An :class:`Image` describes media that is already part of the package: the
caller supplies its relationship id, its size and a drawing id unique within
the document. This module only builds the run that displays it.
"""

from dataclasses import dataclass
from typing import Optional

from wordml_tree.run.run import Run
from wordml_tree.shared.units import pixels_to_emu
from wordml_tree.shared.validation import require_int
from wordml_tree.tree.namespaces import WORDML_NAMESPACES
from wordml_tree.tree.node import XmlNode

PICTURE_URI = "http://schemas.openxmlformats.org/drawingml/2006/picture"


def _element(tag: str, attributes: Optional[dict] = None, *children: XmlNode) -> XmlNode:
    return XmlNode(tag=tag, attributes=dict(attributes or {}), children=list(children))


@dataclass(frozen=True)
class Image:
    """Picture reference with its display size in EMU."""

    relationship_id: str
    width_emu: int
    height_emu: int
    drawing_id: int
    name: str = ""
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the picture reference."""
        if not isinstance(self.relationship_id, str) or not self.relationship_id.strip():
            raise ValueError("Image relationship id cannot be empty")
        require_int("image width", self.width_emu, minimum=1)
        require_int("image height", self.height_emu, minimum=1)
        require_int("drawing id", self.drawing_id, minimum=1)

    @classmethod
    def from_pixels(
        cls,
        relationship_id: str,
        width: float,
        height: float,
        drawing_id: int,
        name: str = "",
        description: Optional[str] = None
    ) -> "Image":
        """Create an image sized in 96-dpi pixels."""
        return cls(
            relationship_id=relationship_id,
            width_emu=pixels_to_emu(width),
            height_emu=pixels_to_emu(height),
            drawing_id=drawing_id,
            name=name,
            description=description,
        )

    @property
    def run(self) -> "PictureRun":
        """A new run displaying this image."""
        return PictureRun(self)


def build_drawing(image: Image) -> XmlNode:
    """Build the ``w:drawing`` subtree for an inline picture."""
    name = image.name or f"Picture {image.drawing_id}"
    doc_properties = {"id": image.drawing_id, "name": name}
    if image.description is not None:
        doc_properties["descr"] = image.description
    extent = {"cx": image.width_emu, "cy": image.height_emu}

    picture = _element(
        "pic:pic", {"xmlns:pic": WORDML_NAMESPACES["pic"]},
        _element(
            "pic:nvPicPr", None,
            _element("pic:cNvPr", {"id": 0, "name": name}),
            _element(
                "pic:cNvPicPr", None,
                _element("a:picLocks", {"noChangeAspect": 1, "noChangeArrowheads": 1}),
            ),
        ),
        _element(
            "pic:blipFill", None,
            _element("a:blip", {"r:embed": image.relationship_id, "cstate": "none"}),
            _element("a:srcRect"),
            _element("a:stretch", None, _element("a:fillRect")),
        ),
        _element(
            "pic:spPr", {"bwMode": "auto"},
            _element(
                "a:xfrm", None,
                _element("a:off", {"x": 0, "y": 0}),
                _element("a:ext", dict(extent)),
            ),
            _element("a:prstGeom", {"prst": "rect"}, _element("a:avLst")),
        ),
    )

    inline = _element(
        "wp:inline", {"distT": 0, "distB": 0, "distL": 0, "distR": 0},
        _element("wp:extent", dict(extent)),
        _element("wp:effectExtent", {"b": 0, "l": 0, "r": 0, "t": 0}),
        _element("wp:docPr", doc_properties),
        _element(
            "wp:cNvGraphicFramePr", None,
            _element(
                "a:graphicFrameLocks",
                {"xmlns:a": WORDML_NAMESPACES["a"], "noChangeAspect": 1},
            ),
        ),
        _element(
            "a:graphic", {"xmlns:a": WORDML_NAMESPACES["a"]},
            _element("a:graphicData", {"uri": PICTURE_URI}, picture),
        ),
    )
    return _element("w:drawing", None, inline)


class PictureRun(Run):
    """Run containing an inline picture."""

    def __init__(self, image: Image) -> None:
        drawing = build_drawing(image)
        super().__init__()
        self.add_child(drawing)
        self.image = image
