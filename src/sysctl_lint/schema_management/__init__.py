"""Schema management exports."""

from .schema_models import WILDCARD, Schema, SchemaRule, ValueConstraint, ValueKind
from .schema_parser import SchemaFaultReason, SchemaSyntaxFault, load_schema, parse_schema

__all__ = [
    "WILDCARD",
    "Schema",
    "SchemaRule",
    "ValueConstraint",
    "ValueKind",
    "SchemaFaultReason",
    "SchemaSyntaxFault",
    "load_schema",
    "parse_schema",
]
