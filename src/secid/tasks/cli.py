# src/secid/tasks/cli.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""secid CLI: identifier detection, validation and extraction.

Commands:
    types       List the registered identifier families.
    detect      Print the families a value validates under.
    validate    Check a value; exit code 1 when invalid.
    parse       Parse a value under an ambiguity policy.
    normalize   Print the canonical form of a value for one family.
    extract     Find identifiers in text (argument, file or stdin).
    explain     Per-family validity and errors for a value.

Every command writes one JSON document to stdout. Domain failures are written
as ``{"error": ..., "message": ..., "details": ...}`` with exit code 1.

Environment:
    SECID_LOG_LEVEL              Root log level (logs go to stderr).
    SECID_DEFAULT_ON_AMBIGUOUS   Default policy for ``parse``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, NoReturn

import typer

from secid.application.schemas.dto.identifiers import IdentifierDTO, MatchDTO
from secid.application.services.identifier_service import IdentifierService
from secid.config.settings import get_settings
from secid.domain.entities.base import SecurityIdentifier
from secid.domain.exceptions.identifiers import SecIdError
from secid.infrastructure.logging.logger import configure_root_logging, get_json_logger

log = get_json_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _service() -> IdentifierService:
    return IdentifierService(default_on_ambiguous=get_settings().default_on_ambiguous)


def _emit(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False))


def _fail(exc: SecIdError | ValueError) -> NoReturn:
    """Write a domain failure as JSON and exit with status 1."""
    code = exc.code if isinstance(exc, SecIdError) else "invalid_argument"
    details = exc.details if isinstance(exc, SecIdError) else {}
    log.info("cli.failed", extra={"extra": {"error": code}})
    _emit({"error": code, "message": str(exc), "details": details})
    raise typer.Exit(code=1)


def _identifier_payload(result: SecurityIdentifier | list[SecurityIdentifier] | None) -> Any:
    if result is None:
        return None
    if isinstance(result, list):
        return [IdentifierDTO.from_identifier(r).model_dump(mode="json") for r in result]
    return IdentifierDTO.from_identifier(result).model_dump(mode="json")


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override SECID_LOG_LEVEL for this run."
    ),  # noqa: B008
) -> None:
    """Securities identifier toolkit."""
    configure_root_logging(log_level or get_settings().log_level)


@app.command("types")
def list_types() -> None:
    """List the registered identifier families in registration order."""
    _emit(
        [
            {
                "type": family.metadata.type.value,
                "short_name": family.metadata.short_name,
                "full_name": family.metadata.full_name,
                "length": family.metadata.length_label,
                "example": family.metadata.example,
            }
            for family in _service().identifiers()
        ]
    )


@app.command("detect")
def detect(
    value: str = typer.Argument(..., help="Candidate identifier."),  # noqa: B008
    types: list[str] | None = typer.Option(
        None, "--type", "-t", help="Restrict to these families (repeatable)."
    ),  # noqa: B008
) -> None:
    """Print the families VALUE validates under, most specific first."""
    try:
        found = _service().detect(value, types or None)
    except SecIdError as exc:
        _fail(exc)
    _emit([t.value for t in found])


@app.command("validate")
def validate(
    value: str = typer.Argument(..., help="Candidate identifier."),  # noqa: B008
    types: list[str] | None = typer.Option(
        None, "--type", "-t", help="Restrict to these families (repeatable)."
    ),  # noqa: B008
) -> None:
    """Check VALUE; exit code 1 when it validates under no (allowed) family."""
    try:
        found = _service().detect(value, types or None)
    except SecIdError as exc:
        _fail(exc)
    _emit({"input": value.strip(), "valid": bool(found), "types": [t.value for t in found]})
    if not found:
        raise typer.Exit(code=1)


@app.command("parse")
def parse(
    value: str = typer.Argument(..., help="Candidate identifier."),  # noqa: B008
    types: list[str] | None = typer.Option(
        None, "--type", "-t", help="Restrict to these families (repeatable)."
    ),  # noqa: B008
    on_ambiguous: str | None = typer.Option(
        None, "--on-ambiguous", help="Ambiguity policy: first, raise or all."
    ),  # noqa: B008
    strict: bool = typer.Option(
        False, "--strict", help="Fail when nothing matches instead of printing null."
    ),  # noqa: B008
) -> None:
    """Parse VALUE and print the matched identifier(s)."""
    service = _service()
    try:
        if strict:
            result = service.parse_strict(value, types or None, on_ambiguous=on_ambiguous)
        else:
            result = service.parse(value, types or None, on_ambiguous=on_ambiguous)
    except (SecIdError, ValueError) as exc:
        _fail(exc)
    _emit(_identifier_payload(result))


@app.command("normalize")
def normalize(
    value: str = typer.Argument(..., help="Identifier to normalize."),  # noqa: B008
    type_: str = typer.Option(..., "--type", "-t", help="Identifier family."),  # noqa: B008
) -> None:
    """Print the canonical form of VALUE as a member of one family."""
    try:
        family = _service().get_type(type_)
        instance = family.parse(value)
    except SecIdError as exc:
        _fail(exc)
    _emit(
        {
            "type": instance.type.value,
            "normalized": instance.normalized(),
            "pretty": instance.pretty(),
        }
    )


@app.command("extract")
def extract(
    text: str | None = typer.Argument(
        None, help="Text to scan; reads --file or stdin when omitted."
    ),  # noqa: B008
    file: Path | None = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="Read the text from this file."
    ),  # noqa: B008
    types: list[str] | None = typer.Option(
        None, "--type", "-t", help="Restrict to these families (repeatable)."
    ),  # noqa: B008
) -> None:
    """Print every identifier found in the text, in text order."""
    if text is None:
        text = file.read_text(encoding="utf-8") if file is not None else sys.stdin.read()
    try:
        matches = _service().extract(text, types or None)
    except SecIdError as exc:
        _fail(exc)
    log.info("extract.done", extra={"extra": {"chars": len(text), "matches": len(matches)}})
    _emit([MatchDTO.from_match(m).model_dump(mode="json") for m in matches])


@app.command("explain")
def explain(
    value: str = typer.Argument(..., help="Candidate identifier."),  # noqa: B008
    types: list[str] | None = typer.Option(
        None, "--type", "-t", help="Restrict to these families (repeatable)."
    ),  # noqa: B008
) -> None:
    """Print each family's validity and ordered errors for VALUE."""
    try:
        result = _service().explain(value, types or None)
    except SecIdError as exc:
        _fail(exc)
    _emit(result.model_dump(mode="json"))


if __name__ == "__main__":
    app()
