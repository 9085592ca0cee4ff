"""Live calls against the Notion API.

Skipped unless NOTION_TOKEN and ENABLE_API_TESTS are set. NOTION_DATABASE_ID
optionally names a database shared with the integration.
"""

import os

import pytest

from notion_typed import ApplicationError, NotionClient
from notion_typed.resources import ApiServerError, Pagination


@pytest.fixture
def live_client():
    with NotionClient() as client:
        yield client


@pytest.mark.api
@pytest.mark.slow
class TestLiveApi:
    def test_list_databases(self, live_client):
        result = live_client.list_databases(Pagination(page_size=1))

        assert len(result.results) <= 1

    def test_retrieve_shared_database(self, live_client):
        database_id = os.getenv("NOTION_DATABASE_ID")
        if not database_id:
            pytest.skip("NOTION_DATABASE_ID is not set")

        db = live_client.retrieve_database(database_id)

        assert db.id.replace("-", "") == database_id.replace("-", "")

    def test_invalid_id_is_a_validation_error(self, live_client):
        with pytest.raises(ApplicationError) as exc_info:
            live_client.retrieve_database("not-a-uuid")

        assert exc_info.value.status_code == 400
        assert isinstance(exc_info.value.payload, ApiServerError)
        assert exc_info.value.payload.code == "validation_error"
