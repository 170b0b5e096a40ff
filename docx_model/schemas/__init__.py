"""
Pydantic schemas for exporting finished builder entities.

The snapshot is a camelCase tree a downstream serializer can consume.
Values are exported as stored; only unrepresentable values fail.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt

from docx_model.core import get_logger
from docx_model.models import (
    Paragraph, Run, TableCell,
    Text, DeleteText, Tab, Break,
)

logger = get_logger("docx_model.schemas")

# Strict so strings and bools are rejected rather than coerced
Number = Union[StrictInt, StrictFloat]


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class RunPropertySchema(_Schema):
    size: Optional[StrictInt] = Field(default=None, alias="sz")
    size_cs: Optional[StrictInt] = Field(default=None, alias="szCs")
    color: Optional[str] = None
    highlight: Optional[str] = None
    underline: Optional[str] = None
    bold: Optional[StrictBool] = None
    bold_cs: Optional[StrictBool] = Field(default=None, alias="boldCs")
    italic: Optional[StrictBool] = None
    italic_cs: Optional[StrictBool] = Field(default=None, alias="italicCs")
    vanish: Optional[StrictBool] = None


class RunChildSchema(_Schema):
    type: str
    data: Optional[Dict[str, Any]] = None


class RunSchema(_Schema):
    run_property: RunPropertySchema = Field(default_factory=RunPropertySchema, alias="runProperty")
    children: List[RunChildSchema] = []


class ParagraphPropertySchema(_Schema):
    alignment: Optional[str] = None
    style_id: Optional[str] = Field(default=None, alias="styleId")


class ParagraphSchema(_Schema):
    children: List[RunSchema] = []
    paragraph_property: ParagraphPropertySchema = Field(
        default_factory=ParagraphPropertySchema, alias="property"
    )


class CellPropertySchema(_Schema):
    vertical_merge: Optional[str] = Field(default=None, alias="verticalMerge")
    vertical_align: Optional[str] = Field(default=None, alias="verticalAlign")
    grid_span: Optional[Number] = Field(default=None, alias="gridSpan")
    width: Optional[Number] = None


class TableCellSchema(_Schema):
    children: List[Dict[str, Any]] = []
    cell_property: CellPropertySchema = Field(default_factory=CellPropertySchema, alias="property")


def _plain(value: Any) -> Any:
    """Unwrap enum members to their string values."""
    if isinstance(value, Enum):
        return value.value
    return value


def _plain_dict(values: Dict[str, Any]) -> Dict[str, Any]:
    return {k: _plain(v) for k, v in values.items()}


def _run_child_schema(child) -> RunChildSchema:
    if isinstance(child, Text):
        return RunChildSchema(type="text", data={"preserveSpace": child.preserveSpace, "text": child.text})
    if isinstance(child, DeleteText):
        return RunChildSchema(type="deleteText", data={"text": child.text, "preserveSpace": child.preserveSpace})
    if isinstance(child, Tab):
        return RunChildSchema(type="tab")
    if isinstance(child, Break):
        return RunChildSchema(type="break", data={"breakType": _plain(child.breakType)})
    raise TypeError(f"Unsupported run child: {type(child).__name__}")


def run_schema(run: Run) -> RunSchema:
    values = _plain_dict(run.property.toDict())
    # Complex-script variants mirror their base properties
    values["size_cs"] = values.get("size")
    values["bold_cs"] = values.get("bold")
    values["italic_cs"] = values.get("italic")
    return RunSchema(
        run_property=RunPropertySchema(**values),
        children=[_run_child_schema(c) for c in run.children],
    )


def paragraph_schema(paragraph: Paragraph) -> ParagraphSchema:
    return ParagraphSchema(
        children=[run_schema(r) for r in paragraph.children],
        paragraph_property=ParagraphPropertySchema(
            alignment=_plain(paragraph.property.alignment),
            style_id=paragraph.property.styleId,
        ),
    )


def _dump(schema: BaseModel) -> Dict[str, Any]:
    return schema.model_dump(by_alias=True, exclude_none=True)


def _dump_block(block: Any) -> Dict[str, Any]:
    """
    Export one cell content block.

    Paragraphs use their schema; any other block must provide toDict().
    """
    if isinstance(block, Paragraph):
        return _dump(paragraph_schema(block))
    to_dict = getattr(block, "toDict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Unsupported content block: {type(block).__name__}")


def table_cell_schema(cell: TableCell) -> TableCellSchema:
    prop = cell.property
    schema = TableCellSchema(
        children=[_dump_block(b) for b in cell.children],
        cell_property=CellPropertySchema(
            vertical_merge=_plain(prop.verticalMerge),
            vertical_align=_plain(prop.verticalAlign),
            grid_span=prop.gridSpan,
            width=prop.width,
        ),
    )
    logger.debug(
        f"Exported table cell with {len(cell.children)} content blocks",
        extra={"extra_data": {"property": prop.toDict()}},
    )
    return schema


def dump_cell(cell: TableCell) -> Dict[str, Any]:
    """Export a finished cell as {"children": [...], "property": {...}}."""
    return _dump(table_cell_schema(cell))


def dump_cell_json(cell: TableCell) -> str:
    """Export a finished cell as a JSON string."""
    return table_cell_schema(cell).model_dump_json(by_alias=True, exclude_none=True)


def dump_paragraph(paragraph: Paragraph) -> Dict[str, Any]:
    return _dump(paragraph_schema(paragraph))


__all__ = [
    'RunPropertySchema', 'RunChildSchema', 'RunSchema',
    'ParagraphPropertySchema', 'ParagraphSchema',
    'CellPropertySchema', 'TableCellSchema',
    'run_schema', 'paragraph_schema', 'table_cell_schema',
    'dump_cell', 'dump_cell_json', 'dump_paragraph',
]
