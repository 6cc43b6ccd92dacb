"""Configuration parsing exports."""

from .document_builder import build_document, parse_document
from .document_models import Document, DuplicateKeyPolicy, Entry, LogicalLine
from .entry_parser import parse_entry
from .line_scanner import scan_lines
from .parse_faults import DuplicateKeyFault, ParseFault, SyntaxFault, SyntaxFaultReason

__all__ = [
    "Document",
    "DuplicateKeyPolicy",
    "Entry",
    "LogicalLine",
    "ParseFault",
    "SyntaxFault",
    "SyntaxFaultReason",
    "DuplicateKeyFault",
    "scan_lines",
    "parse_entry",
    "build_document",
    "parse_document",
]
