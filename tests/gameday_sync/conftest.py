import pytest

from tests.gameday_sync.fixtures import FakeJsonClient, make_settings


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def fake_client():
    return FakeJsonClient()
