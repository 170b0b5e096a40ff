# Models package - Builder entities for document content
from .paragraph import (
    AlignmentType, BreakType,
    Text, DeleteText, Tab, Break, RunChild,
    RunProperty, Run, ParagraphProperty, Paragraph,
)
from .table import VMergeType, VAlignType, CellProperty, TableCell

__all__ = [
    'AlignmentType', 'BreakType',
    'Text', 'DeleteText', 'Tab', 'Break', 'RunChild',
    'RunProperty', 'Run', 'ParagraphProperty', 'Paragraph',
    'VMergeType', 'VAlignType', 'CellProperty', 'TableCell',
]
