# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT
"""Command line interface for secret recovery."""

from __future__ import annotations

import json
import logging
from typing import NoReturn, Optional

import click

from . import policy as _policy
from .audit import AuditTrail
from .decoder import MAX_BASE, MIN_BASE, decode_value, to_decimal
from .document import CaseResult, is_batch, load_document, select_points, solve_batch
from .errors import ShareError
from .interpolation import interpolate_at_zero
from .validation import validate_document

_logger = logging.getLogger(__name__)


def _abort(exc: ShareError) -> NoReturn:
    click.echo(f"error: {exc.kind}: {exc}", err=True)
    raise SystemExit(1)


def _load(path: str):
    try:
        return load_document(path)
    except ShareError as exc:
        _abort(exc)


def _audit_trail(audit_dir: Optional[str]) -> Optional[AuditTrail]:
    directory = audit_dir or _policy.policy.audit_dir
    return AuditTrail(directory) if directory else None


def _result_json(result: CaseResult) -> dict:
    if result.error is None:
        return {"case": result.case, "secret": result.secret}
    return {"case": result.case, "error": result.error.kind, "message": str(result.error)}


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Recover Shamir secrets from base-N encoded shares."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
@click.option("--audit-dir", type=click.Path(file_okay=False), default=None, help="Write signed audit records here.")
def solve(path: str, as_json: bool, audit_dir: Optional[str]) -> None:
    """Recover the secret of every case in PATH."""
    document = _load(path)
    trail = _audit_trail(audit_dir)

    if not is_batch(document):
        try:
            _, points = select_points(document)
            secret = to_decimal(interpolate_at_zero(points))
        except ShareError as exc:
            if trail:
                trail.record_result(CaseResult(case=1, error=exc))
            _abort(exc)
        result = CaseResult(case=1, secret=secret, indices=tuple(p.x for p in points))
        if trail:
            trail.record_result(result)
        click.echo(json.dumps([_result_json(result)]) if as_json else secret)
        return

    def report(result: CaseResult) -> None:
        if trail:
            trail.record_result(result)
        if as_json:
            return
        if result.ok:
            click.echo(f"case {result.case}: {result.secret}")
        else:
            click.echo(f"case {result.case}: error: {result.error.kind}: {result.error}", err=True)

    try:
        results = solve_batch(document, on_result=report)
    except ShareError as exc:
        _abort(exc)
    if as_json:
        click.echo(json.dumps([_result_json(result) for result in results], indent=2))
    failed = sum(1 for result in results if not result.ok)
    if failed:
        _logger.warning("%d of %d cases failed", failed, len(results))
        raise SystemExit(1)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def check(path: str) -> None:
    """Report every problem in the share document PATH."""
    issues = validate_document(_load(path))
    for issue in issues:
        click.echo(f"{issue.field}: {issue.kind}: {issue.message}")
    if issues:
        raise SystemExit(1)
    click.echo("ok")


@cli.command()
@click.argument("value")
@click.option("--base", type=int, required=True, help=f"Base of VALUE ({MIN_BASE}-{MAX_BASE}).")
def decode(value: str, base: int) -> None:
    """Print VALUE written in BASE as a decimal integer."""
    try:
        click.echo(to_decimal(decode_value(value, base)))
    except ShareError as exc:
        _abort(exc)


@cli.command("verify-audit")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--audit-dir", type=click.Path(file_okay=False), required=True, help="Directory holding the signing key.")
def verify_audit(paths: tuple[str, ...], audit_dir: str) -> None:
    """Verify signatures and chain hashes of audit records."""
    trail = AuditTrail(audit_dir)
    bad = 0
    for path in paths:
        valid = trail.verify_log(path)
        bad += not valid
        click.echo(f"{path}: {'ok' if valid else 'INVALID'}")
    if bad:
        raise SystemExit(1)


def main() -> None:
    cli(prog_name="sss-recover")


if __name__ == "__main__":
    main()
