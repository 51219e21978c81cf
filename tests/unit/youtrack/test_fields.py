"""Tests for tags, custom fields, commands and reports."""

from tests.fixtures.youtrack_mocks import API_URL, make_response, sent


def test_list_tags(fetcher):
    fetcher.session.request.return_value = make_response([{"name": "urgent"}])

    tags = fetcher.list_tags(query="urg", skip=0)

    _, url, kwargs = sent(fetcher)
    assert url == f"{API_URL}/tags"
    assert kwargs["params"] == {"$skip": 0, "query": "urg"}
    assert tags == [{"name": "urgent"}]


def test_get_tag(fetcher):
    fetcher.session.request.return_value = make_response({"name": "urgent"})

    fetcher.get_tag("6-1")

    _, url, _ = sent(fetcher)
    assert url == f"{API_URL}/tags/6-1"


def test_list_custom_fields(fetcher):
    fetcher.session.request.return_value = make_response([{"name": "Priority"}])

    fetcher.list_custom_fields(top=100)

    _, url, kwargs = sent(fetcher)
    assert url == f"{API_URL}/admin/customFieldSettings/customFields"
    assert kwargs["params"] == {"$top": 100}


def test_get_custom_field(fetcher):
    fetcher.session.request.return_value = make_response({"name": "Priority"})

    fetcher.get_custom_field("58-1")

    _, url, _ = sent(fetcher)
    assert url == f"{API_URL}/admin/customFieldSettings/customFields/58-1"


def test_apply_command(fetcher):
    fetcher.session.request.return_value = make_response(None)

    fetcher.apply_command("DEMO-1", "State In Progress", comment="Starting")

    method, url, kwargs = sent(fetcher)
    assert method == "POST"
    assert url == f"{API_URL}/issues/DEMO-1/execute"
    assert kwargs["json"] == {"query": "State In Progress", "comment": "Starting"}


def test_get_available_commands(fetcher):
    fetcher.session.request.return_value = make_response(None)

    assert fetcher.get_available_commands("DEMO-1") == []

    method, url, _ = sent(fetcher)
    assert method == "GET"
    assert url == f"{API_URL}/issues/DEMO-1/execute"


def test_get_project_statistics(fetcher):
    fetcher.session.request.return_value = make_response({"issues": 12})

    assert fetcher.get_project_statistics("DEMO") == {"issues": 12}

    _, url, _ = sent(fetcher)
    assert url == f"{API_URL}/admin/projects/DEMO/statistics"


def test_generate_report(fetcher):
    fetcher.session.request.return_value = make_response({"id": "r-1"})

    fetcher.generate_report("time", {"projects": ["DEMO"]})

    method, url, kwargs = sent(fetcher)
    assert method == "POST"
    assert url == f"{API_URL}/reports/time"
    assert kwargs["json"] == {"projects": ["DEMO"]}
