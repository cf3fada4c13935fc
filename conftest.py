import pytest
from django.core.cache import cache

# Registers the sample view models with the ViewModel marker.
from tests import view_models  # noqa


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()
