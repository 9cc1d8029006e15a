"""Test configuration helpers and shared share documents."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()


def _make_case(k: int, shares: dict[str, tuple[int, str]], n: int | None = None) -> dict:
    record: dict = {"keys": {"n": len(shares) if n is None else n, "k": k}}
    for index, (base, value) in shares.items():
        record[index] = {"base": str(base), "value": value}
    return record


@pytest.fixture
def make_case():
    return _make_case


@pytest.fixture
def sample_case() -> dict:
    # f(x) = x^2 + 3
    return _make_case(
        3,
        {
            "1": (10, "4"),
            "2": (2, "111"),
            "3": (10, "12"),
            "6": (4, "213"),
        },
    )


@pytest.fixture
def batch_document(sample_case) -> dict:
    broken = _make_case(2, {"1": (2, "102"), "2": (10, "5")})
    short = _make_case(3, {"1": (10, "6"), "2": (10, "15")}, n=3)
    return {"cases": [sample_case, broken, short]}


@pytest.fixture
def write_json(tmp_path):
    def _write(name: str, document) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(document))
        return str(path)

    return _write
