"""Tests for the YouTrack project, user and group operations."""

from tests.fixtures.youtrack_mocks import API_URL, make_response, sent


class TestProjectsMixin:
    """Tests for the ProjectsMixin class."""

    def test_list_projects_default_pagination(self, fetcher):
        fetcher.session.request.return_value = make_response([{"shortName": "DEMO"}])

        projects = fetcher.list_projects(skip=0, top=50, fields="id,shortName")

        _, url, kwargs = sent(fetcher)
        assert url == f"{API_URL}/admin/projects"
        assert kwargs["params"] == {"$skip": 0, "$top": 50, "fields": "id,shortName"}
        assert projects == [{"shortName": "DEMO"}]

    def test_get_project(self, fetcher):
        fetcher.session.request.return_value = make_response({"id": "0-0"})

        fetcher.get_project("DEMO")

        method, url, kwargs = sent(fetcher)
        assert method == "GET"
        assert url == f"{API_URL}/admin/projects/DEMO"
        assert "params" not in kwargs

    def test_create_project(self, fetcher):
        fetcher.session.request.return_value = make_response({"shortName": "NEW"})

        fetcher.create_project("New project", "NEW", leader="1-1")

        method, url, kwargs = sent(fetcher)
        assert method == "POST"
        assert url == f"{API_URL}/admin/projects"
        assert kwargs["json"] == {
            "name": "New project",
            "shortName": "NEW",
            "leader": {"id": "1-1"},
        }

    def test_update_project_archive_flag(self, fetcher):
        fetcher.session.request.return_value = make_response({})

        fetcher.update_project("0-0", archived=False)

        method, url, kwargs = sent(fetcher)
        assert method == "POST"
        assert url == f"{API_URL}/admin/projects/0-0"
        assert kwargs["json"] == {"archived": False}

    def test_delete_project(self, fetcher):
        fetcher.session.request.return_value = make_response(None)

        fetcher.delete_project("0-0")

        method, url, _ = sent(fetcher)
        assert method == "DELETE"
        assert url == f"{API_URL}/admin/projects/0-0"

    def test_get_project_custom_fields(self, fetcher):
        fetcher.session.request.return_value = make_response([{"id": "cf-1"}])

        result = fetcher.get_project_custom_fields("0-0")

        _, url, _ = sent(fetcher)
        assert url == f"{API_URL}/admin/projects/0-0/customFields"
        assert result == [{"id": "cf-1"}]


class TestUsersMixin:
    """Tests for the UsersMixin class."""

    def test_get_current_user(self, fetcher):
        fetcher.session.request.return_value = make_response({"login": "admin"})

        user = fetcher.get_current_user(fields="login")

        _, url, kwargs = sent(fetcher)
        assert url == f"{API_URL}/users/me"
        assert kwargs["params"] == {"fields": "login"}
        assert user == {"login": "admin"}

    def test_list_users_with_query(self, fetcher):
        fetcher.session.request.return_value = make_response([])

        fetcher.list_users(query="john", top=5)

        _, url, kwargs = sent(fetcher)
        assert url == f"{API_URL}/users"
        assert kwargs["params"] == {"$top": 5, "query": "john"}

    def test_get_user(self, fetcher):
        fetcher.session.request.return_value = make_response({"id": "1-2"})

        fetcher.get_user("1-2")

        _, url, _ = sent(fetcher)
        assert url == f"{API_URL}/users/1-2"

    def test_list_groups(self, fetcher):
        fetcher.session.request.return_value = make_response(None)

        assert fetcher.list_groups() == []
        _, url, _ = sent(fetcher)
        assert url == f"{API_URL}/groups"

    def test_get_group(self, fetcher):
        fetcher.session.request.return_value = make_response({"name": "devs"})

        fetcher.get_group("3-1", fields="name")

        _, url, kwargs = sent(fetcher)
        assert url == f"{API_URL}/groups/3-1"
        assert kwargs["params"] == {"fields": "name"}
