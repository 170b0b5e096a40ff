"""
docx_model - fluent builder entities for word-processing tables.
"""
from .models import (
    AlignmentType, BreakType, Run, Paragraph,
    VMergeType, VAlignType, CellProperty, TableCell,
)
from .schemas import dump_cell, dump_cell_json

__version__ = "0.1.0"

__all__ = [
    'AlignmentType', 'BreakType', 'Run', 'Paragraph',
    'VMergeType', 'VAlignType', 'CellProperty', 'TableCell',
    'dump_cell', 'dump_cell_json',
]
