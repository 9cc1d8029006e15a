# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT
"""Whole-document validation that reports every problem at once."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from . import policy as _policy
from .decoder import to_decimal
from .document import batch_cases, is_batch, iter_share_fields, parse_keys, parse_share
from .errors import DuplicateXCoordinate, InsufficientPoints, ShareError


@dataclass
class ValidationIssue:
    field: str
    message: str
    kind: str = "ShareError"


def _policy_of(override: Optional[_policy.RecoveryPolicy]) -> _policy.RecoveryPolicy:
    return override if override is not None else _policy.policy


def _issue(field: str, exc: ShareError) -> ValidationIssue:
    return ValidationIssue(field, str(exc), exc.kind)


def validate_case(
    record: Any,
    *,
    prefix: str = "",
    policy: Optional[_policy.RecoveryPolicy] = None,
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if not isinstance(record, Mapping):
        issues.append(ValidationIssue(prefix.rstrip(".") or "record", "Record must be an object.", "InvalidField"))
        return issues

    keys = None
    try:
        keys = parse_keys(record, policy=policy)
    except ShareError as exc:
        issues.append(_issue(f"{prefix}keys", exc))

    indices: list[int] = []
    for index, entry in iter_share_fields(record):
        try:
            share = parse_share(index, entry, policy=policy)
            share.to_point()
        except ShareError as exc:
            issues.append(_issue(f"{prefix}{index}", exc))
        else:
            indices.append(share.index)

    if keys is not None and len(indices) < keys.k:
        issues.append(
            _issue(
                f"{prefix}keys.k",
                InsufficientPoints(f"Threshold is {keys.k} but only {len(indices)} shares are usable"),
            )
        )
    if _policy_of(policy).selection == "sorted":
        indices.sort()
    selected = indices[: keys.k] if keys is not None else indices
    seen: set[int] = set()
    for index in selected:
        if index in seen:
            label = to_decimal(index)
            issues.append(
                _issue(f"{prefix}{label}", DuplicateXCoordinate(f"Share index {label} is repeated"))
            )
        seen.add(index)
    return issues


def validate_document(
    document: Any,
    *,
    policy: Optional[_policy.RecoveryPolicy] = None,
) -> list[ValidationIssue]:
    """Return every issue found in a single-case or batch document."""
    if not is_batch(document):
        return validate_case(document, policy=policy)
    try:
        cases = batch_cases(document)
    except ShareError as exc:
        return [_issue("cases", exc)]
    return collect_issues(
        *(
            validate_case(record, prefix=f"case {number}.", policy=policy)
            for number, record in enumerate(cases, start=1)
        )
    )


def collect_issues(*sources: Iterable[ValidationIssue]) -> list[ValidationIssue]:
    aggregated: list[ValidationIssue] = []
    for source in sources:
        aggregated.extend(source)
    return aggregated


__all__ = ["ValidationIssue", "validate_case", "validate_document", "collect_issues"]
