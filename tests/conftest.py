"""Shared pytest configuration: headless matplotlib backend."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    """Close figures created by a test."""
    yield
    plt.close("all")
