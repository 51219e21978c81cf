"""Tests for the YouTrack issue operations."""

import pytest

from youtrack_mcp.exceptions import YouTrackApiError

from tests.fixtures.youtrack_mocks import API_URL, make_response, sent


class TestIssuesMixin:
    """Tests for the IssuesMixin class."""

    def test_list_issues_composes_query_from_filters(self, fetcher):
        """Test that discrete filters are joined in a fixed order."""
        fetcher.session.request.return_value = make_response([{"idReadable": "P-1"}])

        result = fetcher.list_issues(
            project="P", assignee="me", state="Open", skip=0, top=10
        )

        method, url, kwargs = sent(fetcher)
        assert method == "GET"
        assert url == f"{API_URL}/issues"
        assert kwargs["params"] == {
            "$skip": 0,
            "$top": 10,
            "query": "project: P and assignee: me and state: Open",
        }
        assert result == [{"idReadable": "P-1"}]

    def test_list_issues_raw_query_takes_precedence(self, fetcher):
        fetcher.session.request.return_value = make_response([])

        fetcher.list_issues(project="P", query="#Unresolved", priority="Critical")

        _, _, kwargs = sent(fetcher)
        assert kwargs["params"] == {"query": "#Unresolved"}

    def test_list_issues_without_filters_sends_no_query(self, fetcher):
        fetcher.session.request.return_value = make_response([])

        fetcher.list_issues(fields="id,summary")

        _, _, kwargs = sent(fetcher)
        assert kwargs["params"] == {"fields": "id,summary"}

    def test_list_issues_null_payload_is_empty_list(self, fetcher):
        fetcher.session.request.return_value = make_response(None)

        assert fetcher.list_issues() == []

    def test_get_issue(self, fetcher):
        fetcher.session.request.return_value = make_response(
            {"idReadable": "DEMO-1", "summary": "Broken"}
        )

        issue = fetcher.get_issue("DEMO-1", fields="idReadable,summary")

        method, url, kwargs = sent(fetcher)
        assert method == "GET"
        assert url == f"{API_URL}/issues/DEMO-1"
        assert kwargs["params"] == {"fields": "idReadable,summary"}
        assert issue["summary"] == "Broken"

    def test_get_issue_quotes_path_segment(self, fetcher):
        fetcher.session.request.return_value = make_response({})

        fetcher.get_issue("a/b c")

        _, url, _ = sent(fetcher)
        assert url == f"{API_URL}/issues/a%2Fb%20c"

    def test_create_issue_body(self, fetcher):
        """Test that references are wrapped as {"id": ...} objects."""
        fetcher.session.request.return_value = make_response({"idReadable": "P-2"})

        fetcher.create_issue(
            project="0-1",
            summary="S",
            assignee="1-5",
            tags=["t1", "t2"],
        )

        method, url, kwargs = sent(fetcher)
        assert method == "POST"
        assert url == f"{API_URL}/issues"
        assert kwargs["json"] == {
            "project": {"id": "0-1"},
            "summary": "S",
            "assignee": {"id": "1-5"},
            "tags": [{"id": "t1"}, {"id": "t2"}],
        }

    def test_create_issue_with_type_and_priority(self, fetcher):
        fetcher.session.request.return_value = make_response({})

        fetcher.create_issue(
            project="0-1",
            summary="S",
            description="D",
            priority="p-1",
            issue_type="type-1",
            fields="id",
        )

        _, _, kwargs = sent(fetcher)
        assert kwargs["json"] == {
            "project": {"id": "0-1"},
            "summary": "S",
            "description": "D",
            "priority": {"id": "p-1"},
            "type": {"id": "type-1"},
        }
        assert kwargs["params"] == {"fields": "id"}

    def test_update_issue_keeps_explicit_falsy_values(self, fetcher):
        """Test that an explicit False or empty string is sent."""
        fetcher.session.request.return_value = make_response({})

        fetcher.update_issue("DEMO-1", description="", uses_markdown=False)

        method, url, kwargs = sent(fetcher)
        assert method == "POST"
        assert url == f"{API_URL}/issues/DEMO-1"
        assert kwargs["json"] == {"description": "", "usesMarkdown": False}

    def test_update_issue_state_and_tags(self, fetcher):
        fetcher.session.request.return_value = make_response({})

        fetcher.update_issue("DEMO-1", state="s-1", tags=[])

        _, _, kwargs = sent(fetcher)
        assert kwargs["json"] == {"state": {"id": "s-1"}, "tags": []}

    def test_delete_issue(self, fetcher):
        fetcher.session.request.return_value = make_response(None)

        assert fetcher.delete_issue("DEMO-1") is None

        method, url, _ = sent(fetcher)
        assert method == "DELETE"
        assert url == f"{API_URL}/issues/DEMO-1"

    def test_search_issues(self, fetcher):
        fetcher.session.request.return_value = make_response([{"id": "2-1"}])

        result = fetcher.search_issues("assignee: me", skip=5, top=5, fields="id")

        _, url, kwargs = sent(fetcher)
        assert url == f"{API_URL}/issues"
        assert kwargs["params"] == {
            "query": "assignee: me",
            "$skip": 5,
            "$top": 5,
            "fields": "id",
        }
        assert result == [{"id": "2-1"}]

    def test_errors_propagate(self, fetcher):
        fetcher.session.request.return_value = make_response(
            {"error": "Not Found", "error_description": "Issue not found"},
            status_code=404,
            reason="Not Found",
        )

        with pytest.raises(YouTrackApiError, match="Issue not found"):
            fetcher.get_issue("NOPE-1")
