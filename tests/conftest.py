"""
Pytest configuration and fixtures for rotorkit tests.
"""

import pytest
import torch

from rotorkit import Vector3, Rotor3, Config, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against a fresh default configuration."""
    set_config(Config())
    yield
    set_config(Config())


@pytest.fixture
def generator():
    """Seeded generator for reproducible random inputs."""
    return torch.Generator().manual_seed(0)


@pytest.fixture
def x_axis():
    return Vector3(1.0, 0.0, 0.0)


@pytest.fixture
def y_axis():
    return Vector3(0.0, 1.0, 0.0)


@pytest.fixture
def z_axis():
    return Vector3(0.0, 0.0, 1.0)


@pytest.fixture
def random_vectors(generator):
    """A handful of non-unit vectors in [-2, 2]^3."""
    data = torch.rand(8, 3, generator=generator) * 4 - 2
    return [Vector3.from_tensor(row) for row in data]


@pytest.fixture
def random_rotors(generator):
    """A handful of unit rotors with random components."""
    data = torch.randn(8, 4, generator=generator)
    data = data / data.norm(dim=-1, keepdim=True)
    return [Rotor3.from_tensor(row) for row in data]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "contracts: tests that rely on debug precondition checks"
    )


def pytest_collection_modifyitems(config, items):
    """Skip contract tests when assertions are stripped (python -O)."""
    if not __debug__:
        skip_contracts = pytest.mark.skip(reason="Assertions disabled (-O)")
        for item in items:
            if "contracts" in item.keywords:
                item.add_marker(skip_contracts)
