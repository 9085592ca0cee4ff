"""Decoding recorded Notion payloads into the resource models."""

import pytest
from pydantic import ValidationError

from notion_typed.pipeline import decode_failure, decode_success
from notion_typed.resources import (
    ApiServerError,
    Database,
    DatabaseList,
    DatabaseQuery,
    Page,
    PageList,
    Pagination,
)
from tests.fixtures.notion_responses import (
    DATABASE,
    DATABASE_ID,
    DATABASE_LIST,
    PAGE,
    PAGE_LIST,
    VALIDATION_ERROR,
)


@pytest.mark.unit
class TestDatabase:
    def test_decodes_schema(self):
        db = decode_success(DATABASE.encode(), Database)

        assert db.object == "database"
        assert db.id == DATABASE_ID
        assert db.plain_title == "Task List 5132beee"
        assert db.title[0].annotations is not None
        assert db.title[0].annotations.color == "default"
        assert db.title[0].text is not None
        assert db.title[0].text.link is None

    def test_property_configs_follow_type(self):
        db = decode_success(DATABASE.encode(), Database)

        status = db.properties["Status"]
        assert status.type == "select"
        assert status.select is not None
        assert [o.name for o in status.select.options] == ["To Do", "Doing", "Done"]
        assert status.multi_select is None

        tag = db.properties["Tag"]
        assert tag.multi_select is not None
        assert tag.multi_select.options[1].color == "pink"

        assert db.properties["Name"].title is not None
        assert db.properties["Date Created"].created_time is not None
        assert db.properties["Needs \u2615\ufe0f?"].checkbox is not None

    def test_list(self):
        page = decode_success(DATABASE_LIST.encode(), DatabaseList)

        assert page.has_more is False
        assert page.next_cursor == "MTY3NDE4NGYtZTdiYy00NzFlLWE0NjctODcxOTIyYWU3ZmM3"
        assert [db.plain_title for db in page.results] == ["Grocery list"]
        assert page.results[0].properties == {}

    def test_unknown_fields_are_ignored(self):
        db = Database.model_validate({"id": "x", "is_inline": True, "icon": None})

        assert db.id == "x"
        assert not hasattr(db, "is_inline")


@pytest.mark.unit
class TestPage:
    def test_decodes_property_values(self):
        page = decode_success(PAGE.encode(), Page)

        assert page.parent.type == "database_id"
        assert page.parent.database_id == DATABASE_ID
        props = page.properties
        assert props["Name"].title is not None
        assert props["Name"].title[0].plain_text == "Wax skis"
        assert props["Status"].select is not None
        assert props["Status"].select.name == "Doing"
        assert props["Tag"].multi_select is not None
        assert [v.name for v in props["Tag"].multi_select] == ["skiing"]
        assert props["Needs coffee?"].checkbox is True
        assert props["Estimate"].number == 2.5

    def test_query_results(self):
        pages = decode_success(PAGE_LIST.encode(), PageList)

        assert pages.next_cursor is None
        assert len(pages.results) == 1
        assert pages.results[0].id == "b55c9c91-384d-452b-81db-d1ef79372b75"


@pytest.mark.unit
class TestApiServerError:
    def test_decodes_error_body(self):
        error, decode_error = decode_failure(VALIDATION_ERROR.encode(), ApiServerError)

        assert decode_error is None
        assert error.status == 400
        assert error.code == "validation_error"
        assert str(error).startswith("validation_error [The provided database ID")

    def test_partial_body_keeps_valid_fields(self):
        body = b'{"status": "four hundred", "code": "object_not_found"}'

        error, decode_error = decode_failure(body, ApiServerError)

        assert decode_error is not None
        assert error.code == "object_not_found"
        assert error.status == 0


@pytest.mark.unit
class TestPagination:
    def test_empty_query(self):
        assert Pagination().query() == {}

    def test_full_query(self):
        pagination = Pagination(page_size=50, start_cursor="abc")

        assert pagination.query() == {"page_size": "50", "start_cursor": "abc"}

    @pytest.mark.parametrize("size", [0, 101])
    def test_page_size_bounds(self, size):
        with pytest.raises(ValidationError):
            Pagination(page_size=size)


@pytest.mark.unit
class TestDatabaseQuery:
    def test_dump_omits_unset_fields(self):
        query = DatabaseQuery(
            filter={"property": "Status", "select": {"equals": "Doing"}},
            page_size=10,
        )

        assert query.model_dump(exclude_none=True) == {
            "filter": {"property": "Status", "select": {"equals": "Doing"}},
            "page_size": 10,
        }
