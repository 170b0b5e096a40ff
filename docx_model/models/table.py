"""
Table cell model for the document builder.

Values are stored as given. Span, width and enum checks belong to
whoever consumes the finished cell.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .paragraph import Paragraph


class VMergeType(str, Enum):
    RESTART = "restart"
    CONTINUE = "continue"


class VAlignType(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass
class CellProperty:
    """Formatting properties of a table cell. Every field is absent by default."""
    verticalMerge: Optional[Union[VMergeType, str]] = None
    verticalAlign: Optional[Union[VAlignType, str]] = None
    gridSpan: Optional[int] = None
    width: Optional[float] = None

    def toDict(self) -> Dict[str, Any]:
        """Return only the fields that have been set."""
        return {
            key: value
            for key, value in (
                ("verticalMerge", self.verticalMerge),
                ("verticalAlign", self.verticalAlign),
                ("gridSpan", self.gridSpan),
                ("width", self.width),
            )
            if value is not None
        }


@dataclass
class TableCell:
    """Represents a single cell in a table: ordered content plus properties."""
    children: List[Paragraph] = field(default_factory=list)
    property: CellProperty = field(default_factory=CellProperty)

    def addParagraph(self, p: Paragraph) -> "TableCell":
        """Append a content block after the existing ones."""
        self.children.append(p)
        return self

    def verticalMerge(self, t: Union[VMergeType, str]) -> "TableCell":
        self.property.verticalMerge = t
        return self

    def verticalAlign(self, t: Union[VAlignType, str]) -> "TableCell":
        self.property.verticalAlign = t
        return self

    def gridSpan(self, v: int) -> "TableCell":
        """Set the number of grid columns this cell occupies."""
        self.property.gridSpan = v
        return self

    def width(self, v: float) -> "TableCell":
        """Set the cell width in the document's native unit."""
        self.property.width = v
        return self
