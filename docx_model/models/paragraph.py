"""
Paragraph and run models: the content blocks placed inside table cells.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class BreakType(str, Enum):
    PAGE = "page"
    COLUMN = "column"
    TEXT_WRAPPING = "textWrapping"


class AlignmentType(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFIED = "justified"


@dataclass
class Text:
    text: str
    preserveSpace: bool = True


@dataclass
class DeleteText:
    text: str
    preserveSpace: bool = True


@dataclass
class Tab:
    pass


@dataclass
class Break:
    breakType: Union[BreakType, str]


RunChild = Union[Text, DeleteText, Tab, Break]


@dataclass
class RunProperty:
    """Character formatting of a run. Every field is absent by default."""
    size: Optional[int] = None  # Half-points
    color: Optional[str] = None  # Hex
    highlight: Optional[str] = None
    underline: Optional[str] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    vanish: Optional[bool] = None

    def toDict(self) -> Dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if v is not None}


@dataclass
class Run:
    """A span of text content sharing one set of character properties."""
    children: List[RunChild] = field(default_factory=list)
    property: RunProperty = field(default_factory=RunProperty)

    def addText(self, text: str) -> "Run":
        self.children.append(Text(text))
        return self

    def addDeleteText(self, text: str) -> "Run":
        self.children.append(DeleteText(text))
        return self

    def addTab(self) -> "Run":
        self.children.append(Tab())
        return self

    def addBreak(self, t: Union[BreakType, str]) -> "Run":
        self.children.append(Break(t))
        return self

    def size(self, v: int) -> "Run":
        self.property.size = v
        return self

    def color(self, c: str) -> "Run":
        self.property.color = c
        return self

    def highlight(self, c: str) -> "Run":
        self.property.highlight = c
        return self

    def bold(self) -> "Run":
        self.property.bold = True
        return self

    def italic(self) -> "Run":
        self.property.italic = True
        return self

    def underline(self, t: str) -> "Run":
        self.property.underline = t
        return self

    def vanish(self) -> "Run":
        self.property.vanish = True
        return self

    def getText(self) -> str:
        """Concatenate the visible text of the run (deleted text excluded)."""
        parts = []
        for child in self.children:
            if isinstance(child, Text):
                parts.append(child.text)
            elif isinstance(child, Tab):
                parts.append("\t")
            elif isinstance(child, Break):
                parts.append("\n")
        return "".join(parts)


@dataclass
class ParagraphProperty:
    alignment: Optional[Union[AlignmentType, str]] = None
    styleId: Optional[str] = None

    def toDict(self) -> Dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if v is not None}


@dataclass
class Paragraph:
    """Represents a paragraph: an ordered list of runs plus paragraph properties."""
    children: List[Run] = field(default_factory=list)
    property: ParagraphProperty = field(default_factory=ParagraphProperty)

    def addRun(self, run: Run) -> "Paragraph":
        self.children.append(run)
        return self

    def align(self, t: Union[AlignmentType, str]) -> "Paragraph":
        self.property.alignment = t
        return self

    def style(self, styleId: str) -> "Paragraph":
        self.property.styleId = styleId
        return self

    def getText(self) -> str:
        return "".join(run.getText() for run in self.children)
