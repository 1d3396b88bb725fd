"""Shared fixtures for polysecret tests."""

import json
import logging
import random
import pytest


EXAMPLE_DOCUMENT = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def example_data():
    """Raw JSON object for y = x^2 + 2x + 1 sampled at 1, 2, 3, 6."""
    return json.loads(json.dumps(EXAMPLE_DOCUMENT))


@pytest.fixture
def write_case(tmp_path):
    """Write a JSON test case under tmp_path and return its path as str."""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(data if isinstance(data, str) else json.dumps(data),
                        encoding='utf-8')
        return str(path)
    return _write


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers cli.setup_logger attached so streams never go stale."""
    yield
    logger = logging.getLogger('polysecret')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_document():
    """Build a raw document sampling an integer polynomial.

    coeffs are highest degree first; bases defaults to 10 for every point.
    """
    from polysecret.codec import encode_value
    from polysecret.matrix import poly_eval

    def _make(coeffs, xs, k, bases=None):
        bases = bases or [10] * len(xs)
        data = {"keys": {"n": len(xs), "k": k}}
        for x, base in zip(xs, bases):
            data[str(x)] = {"base": str(base), "value": encode_value(poly_eval(coeffs, x), base)}
        return data
    return _make
