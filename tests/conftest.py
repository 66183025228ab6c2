import pytest

from nestbind import set_current_injector
from nestbind._context import _current_injector


@pytest.fixture(autouse=True)
def clean_injection_context():
    set_current_injector(None)
    yield
    leaked = _current_injector.get()
    set_current_injector(None)
    assert leaked is None, f"injection context leaked: {leaked!r}"
