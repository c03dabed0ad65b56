"""Test configuration for shapes."""

import pytest

from scripts.shapes import SchemaBuilder


@pytest.fixture
def builder():
    """Builder with a private reference cache."""
    return SchemaBuilder({"shared_cache": False})


@pytest.fixture
def titled(builder):
    """Titled string schema usable as a reference key."""
    return builder.desc("Name", "desc", builder.string())
