import pytest
from django.test.runner import DiscoverRunner
from django.test.utils import setup_test_environment, teardown_test_environment

from fieldkit.hooks import FIELD_FILTERS


@pytest.fixture(scope="session", autouse=True)
def django_test_environment():
    setup_test_environment()
    yield
    teardown_test_environment()


@pytest.fixture(scope="session", autouse=True)
def django_db_setup(django_test_environment):
    runner = DiscoverRunner(verbosity=0, interactive=False)
    old_config = runner.setup_databases()
    yield
    runner.teardown_databases(old_config)


@pytest.fixture()
def db(django_db_setup):
    """Compatibility fixture matching pytest-django's signature."""
    pass


@pytest.fixture()
def global_filters():
    """Yield the process-wide pipeline and restore its hooks afterwards."""

    saved = FIELD_FILTERS.derive()
    yield FIELD_FILTERS
    FIELD_FILTERS.clear()
    for event in saved.events():
        for callback in saved.callbacks(event):
            FIELD_FILTERS.add(event, callback)
