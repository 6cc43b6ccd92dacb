"""Schema parser tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from sysctl_lint.schema_management import (
    SchemaFaultReason,
    SchemaSyntaxFault,
    ValueConstraint,
    ValueKind,
    load_schema,
    parse_schema,
)


def test_parses_rules_in_file_order() -> None:
    schema = parse_schema(
        """
# kernel settings
kernel.hostname string
net.ipv4.ip_forward int
; comment
net.ipv4.conf.*.rp_filter   bool
vm.overcommit_memory enum(0, 1,2)
kernel.domainname regex([a-z.]+)
"""
    )

    assert [rule.pattern for rule in schema.rules] == [
        "kernel.hostname",
        "net.ipv4.ip_forward",
        "net.ipv4.conf.*.rp_filter",
        "vm.overcommit_memory",
        "kernel.domainname",
    ]
    assert [rule.line for rule in schema.rules] == [3, 4, 6, 7, 8]
    assert schema.rules[0].constraint == ValueConstraint(kind=ValueKind.STRING)
    assert schema.rules[1].constraint.kind == ValueKind.INTEGER
    assert schema.rules[2].constraint.kind == ValueKind.BOOLEAN
    assert schema.rules[2].segments == ("net", "ipv4", "conf", "*", "rp_filter")
    assert schema.rules[2].has_wildcard
    assert schema.rules[3].constraint.members == ("0", "1", "2")
    assert schema.rules[4].constraint.pattern == "[a-z.]+"


def test_accepts_arrow_separated_rules() -> None:
    schema = parse_schema("is_active -> bool\nusername->string\n")

    assert [(rule.pattern, rule.constraint.kind) for rule in schema.rules] == [
        ("is_active", ValueKind.BOOLEAN),
        ("username", ValueKind.STRING),
    ]


def test_regex_body_may_contain_arrow_and_spaces() -> None:
    schema = parse_schema("kernel.motd regex(a -> b)\n")

    assert schema.rules[0].constraint.pattern == "a -> b"


@pytest.mark.parametrize(
    ("line", "reason"),
    [
        ("kernel.hostname text", SchemaFaultReason.UNKNOWN_TYPE),
        ("kernel.hostname", SchemaFaultReason.UNKNOWN_TYPE),
        ("kernel.hostname enum()", SchemaFaultReason.UNKNOWN_TYPE),
        ("kernel.hostname enum(a,,b)", SchemaFaultReason.UNKNOWN_TYPE),
        ("kernel..hostname string", SchemaFaultReason.MALFORMED_PATTERN),
        (".kernel string", SchemaFaultReason.MALFORMED_PATTERN),
        ("net.ipv4.conf.eth*.rp_filter int", SchemaFaultReason.MALFORMED_PATTERN),
        ("kernel.name regex([unclosed)", SchemaFaultReason.INVALID_REGEX),
    ],
)
def test_rejects_malformed_rules(line: str, reason: SchemaFaultReason) -> None:
    with pytest.raises(SchemaSyntaxFault) as excinfo:
        parse_schema(f"# leading comment\n{line}\n")

    assert excinfo.value.reason == reason
    assert excinfo.value.line == 2


def test_describe_round_trips_type_tokens() -> None:
    schema = parse_schema("a int\nb bool\nc string\nd enum(x,y)\ne regex(\\d+)\n")

    assert [rule.constraint.describe() for rule in schema.rules] == [
        "int",
        "bool",
        "string",
        "enum(x,y)",
        "regex(\\d+)",
    ]


def test_load_schema_reads_file(tmp_path: Path) -> None:
    schema_path = tmp_path / "sysctl.schema"
    schema_path.write_text("vm.swappiness int\n", encoding="utf-8")

    schema = load_schema(schema_path)

    assert len(schema) == 1
    assert schema.rules[0].pattern == "vm.swappiness"
