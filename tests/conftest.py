"""Shared fixtures."""

import pytest

from tests.reference import VARIANTS, reference_digest


@pytest.fixture
def reference():
    """Return a function computing the reference digest for a variant name."""
    return reference_digest


@pytest.fixture(params=VARIANTS, ids=lambda cls: cls.name)
def variant(request):
    """Each SHA-2 variant class in turn."""
    return request.param
