"""
Tests for named environments and placeholder resolution.
"""

import json

import pytest

from request_explorer.environment import EnvironmentStore, EnvironmentStoreError
from request_explorer.models import RequestItem


@pytest.fixture
def store():
    return EnvironmentStore(
        {
            "dev": {"BASE_URL": "http://localhost:8000", "TOKEN": "dev-token"},
            "prod": {"BASE_URL": "https://api.example.com"},
        },
        active="dev",
    )


def test_resolves_known_placeholders(store):
    assert store.resolve_variables("{{BASE_URL}}/users") == "http://localhost:8000/users"


def test_whitespace_inside_braces_is_allowed(store):
    assert store.resolve_variables("{{ TOKEN }}") == "dev-token"


def test_unknown_placeholders_are_left_alone(store):
    assert store.resolve_variables("{{MISSING}}/{{TOKEN}}") == "{{MISSING}}/dev-token"


def test_no_active_environment_changes_nothing(store):
    store.set_active(None)
    assert store.resolve_variables("{{BASE_URL}}") == "{{BASE_URL}}"


def test_switching_environment(store):
    store.set_active("prod")
    assert store.resolve_variables("{{BASE_URL}}") == "https://api.example.com"


def test_unknown_environment_is_rejected(store):
    with pytest.raises(EnvironmentStoreError):
        store.set_active("staging")
    with pytest.raises(EnvironmentStoreError):
        EnvironmentStore({}, active="staging")


def test_resolve_request_item_returns_a_copy(store):
    item = RequestItem(
        method="POST",
        url="{{BASE_URL}}/login",
        headers={"Authorization": "Bearer {{TOKEN}}"},
        body='{"token": "{{TOKEN}}"}',
    )

    resolved = store.resolve_request_item(item)

    assert resolved.url == "http://localhost:8000/login"
    assert resolved.headers == {"Authorization": "Bearer dev-token"}
    assert resolved.body == '{"token": "dev-token"}'
    assert resolved.id == item.id
    assert item.url == "{{BASE_URL}}/login"


def test_resolve_request_item_keeps_missing_body(store):
    item = RequestItem(method="GET", url="{{BASE_URL}}")
    assert store.resolve_request_item(item).body is None


def test_variable_management(store):
    store.set_variable("USER", "alice")
    assert store.get_variables()["USER"] == "alice"

    assert store.remove_variable("USER")
    assert not store.remove_variable("USER")

    store.set_variable("REGION", "eu", environment="prod")
    assert store.get_variables("prod")["REGION"] == "eu"


def test_set_variable_needs_an_environment():
    with pytest.raises(EnvironmentStoreError):
        EnvironmentStore().set_variable("A", "1")


def test_remove_active_environment_clears_selection(store):
    assert store.remove_environment("dev")
    assert store.active is None
    assert not store.remove_environment("dev")


def test_environments_property_is_a_copy(store):
    store.environments["dev"]["TOKEN"] = "changed"
    assert store.get_variables()["TOKEN"] == "dev-token"


def test_save_and_load(store, tmp_path):
    path = tmp_path / "env.json"
    store.save(path)

    loaded = EnvironmentStore.load(path)

    assert loaded.active == "dev"
    assert loaded.environments == store.environments


def test_load_missing_file_gives_empty_store(tmp_path):
    store = EnvironmentStore.load(tmp_path / "absent.json")
    assert store.environments == {}
    assert store.active is None


def test_load_rejects_invalid_json(tmp_path):
    path = tmp_path / "env.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(EnvironmentStoreError):
        EnvironmentStore.load(path)


def test_load_rejects_non_object(write_json):
    path = write_json("env.json", ["dev"])
    with pytest.raises(EnvironmentStoreError):
        EnvironmentStore.load(path)


def test_saved_file_shape(store, tmp_path):
    path = tmp_path / "env.json"
    store.save(path)

    data = json.loads(path.read_text(encoding="utf-8"))

    assert data["active"] == "dev"
    assert set(data["environments"]) == {"dev", "prod"}
