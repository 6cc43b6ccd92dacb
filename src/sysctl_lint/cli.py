"""Command line interface entry point."""

from __future__ import annotations

import dataclasses
import logging
import sys

import click

from sysctl_lint.config_parsing import DuplicateKeyPolicy
from sysctl_lint.configuration import (
    ConfigurationError,
    LintSettings,
    OutputFormat,
    load_settings,
)
from sysctl_lint.results_writing import format_violations, render_document
from sysctl_lint.run_execution import LintExecutionError, LintRequest, execute_lint_run


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="sysctl-lint")
@click.argument(
    "config_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=str),
)
@click.option(
    "--schema",
    "schema_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=str),
    help="Schema file declaring permitted key patterns and value types",
)
@click.option(
    "--settings",
    "settings_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=str),
    help="YAML settings file; explicit options take precedence over it",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Report keys that no schema rule matches (default: off)",
)
@click.option(
    "--duplicate-keys",
    "duplicate_keys",
    type=click.Choice([policy.value for policy in DuplicateKeyPolicy]),
    default=None,
    help="Fail on repeated keys or let the last definition win (default: reject)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([layout.value for layout in OutputFormat]),
    default=None,
    help="JSON layout of the printed document (default: mapping)",
)
@click.option(
    "--require-exact-keys/--no-require-exact-keys",
    default=None,
    help="Report non-wildcard schema keys absent from the configuration",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(  # pylint: disable=too-many-arguments
    config_path: str | None,
    schema_path: str | None,
    settings_path: str | None,
    strict: bool | None,
    duplicate_keys: str | None,
    output_format: str | None,
    require_exact_keys: bool | None,
    verbose: bool,
) -> None:
    """Parse a sysctl-style CONFIG_PATH (or standard input) and print it as JSON.

    With --schema the document is validated first; violations are printed to
    standard error, one per line, and the exit code is nonzero.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
    try:
        settings = load_settings(settings_path) if settings_path else LintSettings()
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    settings = _apply_overrides(
        settings,
        strict=strict,
        duplicate_keys=duplicate_keys,
        output_format=output_format,
        require_exact_keys=require_exact_keys,
    )

    try:
        outcome = execute_lint_run(
            LintRequest(config_path=config_path, schema_path=schema_path, settings=settings)
        )
    except LintExecutionError as exc:
        raise CliError(str(exc)) from exc

    if not outcome.is_ok:
        for line in format_violations(outcome.violations, source=config_path):
            click.echo(line, err=True)
        raise CliError(f"{len(outcome.violations)} violation(s) found")
    click.echo(render_document(outcome.document, settings.output_format))


def _apply_overrides(
    settings: LintSettings,
    *,
    strict: bool | None,
    duplicate_keys: str | None,
    output_format: str | None,
    require_exact_keys: bool | None,
) -> LintSettings:
    overrides: dict[str, object] = {}
    if strict is not None:
        overrides["strict"] = strict
    if duplicate_keys is not None:
        overrides["duplicate_keys"] = DuplicateKeyPolicy(duplicate_keys)
    if output_format is not None:
        overrides["output_format"] = OutputFormat(output_format)
    if require_exact_keys is not None:
        overrides["require_exact_keys"] = require_exact_keys
    return dataclasses.replace(settings, **overrides)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
