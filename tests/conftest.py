from __future__ import annotations

import random

import pytest

PARITY_SAMPLES_BY_LEVEL = {
    "fast": 100,
    "standard": 1_000,
    "full": 20_000,
}


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--verification-level",
        action="store",
        default="standard",
        choices=("fast", "standard", "full"),
        help=(
            "Select test verification level: "
            "fast (skip slow+full), "
            "standard (skip full), "
            "full (run all)."
        ),
    )
    parser.addoption(
        "--parity-samples",
        action="store",
        type=int,
        default=None,
        help=(
            "Random patterns per parity sweep against int arithmetic. "
            "Defaults to a per-level count."
        ),
    )
    parser.addoption(
        "--parity-seed",
        action="store",
        type=int,
        default=0,
        help="Seed for the random parity sweeps.",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    level = config.getoption("--verification-level")

    if level == "full":
        return

    skip_full = pytest.mark.skip(reason="requires --verification-level=full")
    skip_slow = pytest.mark.skip(reason="skipped in fast verification level")

    for item in items:
        if "full" in item.keywords:
            item.add_marker(skip_full)
            continue
        if level == "fast" and "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def parity_samples(pytestconfig: pytest.Config) -> int:
    override = pytestconfig.getoption("--parity-samples")
    if override is not None:
        if override < 0:
            raise pytest.UsageError("--parity-samples must be >= 0")
        return override
    level = pytestconfig.getoption("--verification-level")
    return PARITY_SAMPLES_BY_LEVEL[level]


@pytest.fixture
def parity_rng(pytestconfig: pytest.Config) -> random.Random:
    return random.Random(pytestconfig.getoption("--parity-seed"))
