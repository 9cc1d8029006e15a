# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT
"""Share documents: parsing, share selection and per-case solving.

A case record looks like::

    {"keys": {"n": 4, "k": 3},
     "1": {"base": "10", "value": "4"},
     "2": {"base": "2", "value": "111"},
     ...}

and a batch document wraps several of them as ``{"cases": [...]}``.
"""
from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Tuple

import yaml

from . import policy as _policy
from .decoder import decode_value, to_decimal
from .errors import InsufficientPoints, InvalidBase, InvalidField, MissingField, ShareError
from .interpolation import interpolate_at_zero
from .shares import Point, Share

_logger = logging.getLogger(__name__)

_INDEX_RE = re.compile(r"[0-9]+")
_YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass(frozen=True)
class ThresholdKeys:
    n: int
    k: int


@dataclass(frozen=True)
class CaseResult:
    """Outcome of one case of a batch; exactly one of ``secret``/``error`` is set."""

    case: int
    secret: Optional[str] = None
    error: Optional[ShareError] = None
    indices: Tuple[int, ...] = field(default=())

    @property
    def ok(self) -> bool:
        return self.error is None


def _active_policy(override: Optional[_policy.RecoveryPolicy]) -> _policy.RecoveryPolicy:
    return override if override is not None else _policy.policy


def _describe(value: Any) -> str:
    if isinstance(value, (str, bool)) or value is None:
        return repr(value)
    return type(value).__name__


def _as_int(value: Any, name: str) -> int:
    # decimal strings go through decode_value, which has no length limit
    if isinstance(value, bool):
        raise InvalidField(f"{name} must be an integer, got {_describe(value)}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INDEX_RE.fullmatch(value.strip()):
        return decode_value(value.strip(), 10)
    raise InvalidField(f"{name} must be an integer, got {_describe(value)}")


def _require_mapping(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidField(f"{name} must be an object, got {type(value).__name__}")
    return value


def parse_keys(
    record: Mapping[str, Any],
    *,
    policy: Optional[_policy.RecoveryPolicy] = None,
) -> ThresholdKeys:
    """Read and check the ``keys`` section of a case record."""
    cfg = _active_policy(policy)
    if "keys" not in record:
        raise MissingField("Record has no 'keys' field")
    keys = _require_mapping(record["keys"], "keys")
    for name in ("n", "k"):
        if name not in keys:
            raise MissingField(f"'keys' has no {name!r} field")
    n = _as_int(keys["n"], "keys.n")
    k = _as_int(keys["k"], "keys.k")
    if k < 1:
        raise InvalidField(f"keys.k must be at least 1, got {to_decimal(k)}")
    if k > cfg.max_threshold:
        raise InvalidField(f"keys.k = {to_decimal(k)} exceeds the limit of {cfg.max_threshold}")
    if n < k:
        raise InvalidField(f"keys.n = {to_decimal(n)} is smaller than keys.k = {to_decimal(k)}")
    return ThresholdKeys(n=n, k=k)


def parse_share(
    index: str,
    entry: Any,
    *,
    policy: Optional[_policy.RecoveryPolicy] = None,
) -> Share:
    """Build a :class:`Share` from the entry stored under *index*."""
    cfg = _active_policy(policy)
    entry = _require_mapping(entry, f"share {index}")
    for name in ("base", "value"):
        if name not in entry:
            raise MissingField(f"Share {index} has no {name!r} field")

    try:
        base = _as_int(entry["base"], f"share {index} base")
    except InvalidField:
        raise InvalidBase(f"Share {index} has an unreadable base {_describe(entry['base'])}") from None
    digits = entry["value"]
    if not isinstance(digits, str):
        raise InvalidField(f"Share {index} value must be a string, got {type(digits).__name__}")
    if len(digits) > cfg.max_value_length:
        raise InvalidField(
            f"Share {index} value has {len(digits)} digits, limit is {cfg.max_value_length}"
        )
    return Share(index=decode_value(index, 10), base=base, digits=digits)


def iter_share_fields(record: Mapping[Any, Any]) -> List[Tuple[str, Any]]:
    """Return the ``(index, entry)`` pairs of *record*, skipping non-index keys."""
    fields = []
    for key, entry in record.items():
        key = str(key)
        if _INDEX_RE.fullmatch(key):
            fields.append((key, entry))
    return fields


def parse_shares(
    record: Mapping[Any, Any],
    *,
    policy: Optional[_policy.RecoveryPolicy] = None,
) -> List[Share]:
    """Parse every share of *record* in selection order."""
    cfg = _active_policy(policy)
    shares = [parse_share(index, entry, policy=cfg) for index, entry in iter_share_fields(record)]
    if cfg.selection == "sorted":
        shares.sort(key=lambda share: share.index)
    return shares


def select_points(
    record: Mapping[Any, Any],
    *,
    policy: Optional[_policy.RecoveryPolicy] = None,
) -> Tuple[ThresholdKeys, List[Point]]:
    """Decode all shares of *record* and return the first ``k`` points.

    Every share is decoded, so a malformed share fails the case even when it
    would not have been selected.
    """
    record = _require_mapping(record, "record")
    keys = parse_keys(record, policy=policy)
    points = [share.to_point() for share in parse_shares(record, policy=policy)]
    if len(points) != keys.n:
        _logger.warning("Record declares n=%s but carries %d shares", to_decimal(keys.n), len(points))
    if len(points) < keys.k:
        raise InsufficientPoints(f"Threshold is {keys.k} but only {len(points)} shares are present")
    selected = points[: keys.k]
    _logger.debug("Selected share indices %s", [to_decimal(p.x) for p in selected])
    return keys, selected


def recover_secret(
    record: Mapping[Any, Any],
    *,
    policy: Optional[_policy.RecoveryPolicy] = None,
) -> int:
    """Recover the secret of one case record."""
    _, points = select_points(record, policy=policy)
    return interpolate_at_zero(points)


def solve_case(
    record: Mapping[Any, Any],
    *,
    policy: Optional[_policy.RecoveryPolicy] = None,
) -> str:
    """Recover the secret of one case record as a decimal string."""
    return to_decimal(recover_secret(record, policy=policy))


def is_batch(document: Any) -> bool:
    return isinstance(document, Mapping) and "cases" in document


def batch_cases(document: Mapping[str, Any]) -> List[Any]:
    cases = document["cases"]
    if not isinstance(cases, list):
        raise InvalidField(f"'cases' must be a list, got {type(cases).__name__}")
    return cases


def solve_batch(
    document: Mapping[str, Any],
    *,
    policy: Optional[_policy.RecoveryPolicy] = None,
    on_result: Optional[Callable[[CaseResult], None]] = None,
) -> List[CaseResult]:
    """Solve every case of a batch document.

    A failing case is recorded in its :class:`CaseResult` and the remaining
    cases still run. *on_result* is called after each case, in order.
    """
    results: List[CaseResult] = []
    for number, record in enumerate(batch_cases(document), start=1):
        try:
            _, points = select_points(record, policy=policy)
            secret = interpolate_at_zero(points)
        except ShareError as exc:
            _logger.warning("Case %d failed: %s: %s", number, exc.kind, exc)
            result = CaseResult(case=number, error=exc)
        else:
            _logger.info("Case %d recovered from %d shares", number, len(points))
            result = CaseResult(
                case=number,
                secret=to_decimal(secret),
                indices=tuple(p.x for p in points),
            )
        results.append(result)
        if on_result is not None:
            on_result(result)
    return results


def _normalise_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key): _normalise_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_normalise_keys(item) for item in value]
    return value


def load_document(path: os.PathLike[str] | str) -> Any:
    """Read a JSON or YAML share document from *path*."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidField(f"{path.name} is not UTF-8 text: {exc}") from exc
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return _normalise_keys(yaml.safe_load(text))
        except (yaml.YAMLError, ValueError) as exc:
            raise InvalidField(f"{path.name} is not valid YAML: {exc}") from exc
    # ValueError covers JSONDecodeError and integers over the str->int digit limit
    try:
        return json.loads(text)
    except ValueError as exc:
        raise InvalidField(f"{path.name} is not valid JSON: {exc}") from exc


__all__ = [
    "ThresholdKeys",
    "CaseResult",
    "parse_keys",
    "parse_share",
    "iter_share_fields",
    "parse_shares",
    "select_points",
    "recover_secret",
    "solve_case",
    "is_batch",
    "batch_cases",
    "solve_batch",
    "load_document",
]
