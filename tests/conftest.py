"""Shared test fixtures for the SSR test suite."""

from __future__ import annotations

import json
import random
from pathlib import Path

import pytest

from ssr.models import Share, ShareSet

SAMPLE_DOCUMENT = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def sample_document() -> dict:
    """n=4, k=3 shares on y = x^2 + 3 (secret 3); share 6 lies beyond n."""
    return json.loads(json.dumps(SAMPLE_DOCUMENT))


@pytest.fixture
def sample_share_set() -> ShareSet:
    """The sample document as loaded: shares 1..n present, share 6 dropped."""
    return ShareSet(
        n=4,
        k=3,
        shares=[
            Share(1, 10, "4"),
            Share(2, 2, "111"),
            Share(3, 10, "12"),
        ],
        name="testcase1",
    )


@pytest.fixture
def sample_file(tmp_path: Path, sample_document: dict) -> Path:
    path = tmp_path / "testcase1.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path
