"""Tests for the object operations of OntraportClient."""

from unittest.mock import Mock

import pytest

from ontraport.core.models import InvalidArgumentError, ObjectNotFoundError, ObjectType
from ontraport.client.ontraport_client import OntraportClient
from ontraport.client.transport import APIError

from conftest import make_response


@pytest.fixture
def client(configuration, mock_http_client, sample_meta):
    """Create a client whose HTTP client serves metadata, then {"code": 0}."""
    def request(method, url, **kwargs):
        if url.endswith("/objects/meta"):
            return make_response(json_data=sample_meta)
        return make_response(json_data={"code": 0})

    mock_http_client.request.side_effect = request
    return OntraportClient(configuration, http_client=mock_http_client)


def last_call(mock_http_client):
    """Keyword arguments of the last request."""
    return mock_http_client.request.call_args[1]


def object_calls(mock_http_client):
    """Requests other than the metadata fetch."""
    return [
        c[1] for c in mock_http_client.request.call_args_list
        if not c[1]["url"].endswith("/objects/meta")
    ]


# ===== Lifecycle Tests =====

def test_client_context_manager(configuration):
    """Test context manager support closes the transport."""
    with OntraportClient(configuration) as client:
        client.transport = Mock()

    client.transport.close.assert_called_once()


# ===== Object Operation Tests =====

@pytest.mark.parametrize("call,method,endpoint,payload", [
    (lambda c: c.get_object("contact", 5), "GET", "/object", {"id": 5}),
    (lambda c: c.get_objects("contact", {"sort": "lastname"}), "GET", "/objects", {"sort": "lastname"}),
    (lambda c: c.get_objects("contact"), "GET", "/objects", {}),
    (lambda c: c.create("contact", {"email": "a@b.c"}), "POST", "/objects", {"email": "a@b.c"}),
    (lambda c: c.save_or_update("contact", {"email": "a@b.c"}), "POST", "/objects/saveorupdate", {"email": "a@b.c"}),
    (lambda c: c.update_object("contact", 5, {"firstname": "X"}), "PUT", "/objects", {"firstname": "X", "id": 5}),
    (lambda c: c.tag_objects("contact", {"add_list": "1,2", "ids": "3"}), "PUT", "/objects/tag", {"add_list": "1,2", "ids": "3"}),
    (lambda c: c.untag_objects("contact", {"remove_list": "1", "ids": "3"}), "DELETE", "/objects/tag", {"remove_list": "1", "ids": "3"}),
])
def test_object_operations(client, mock_http_client, call, method, endpoint, payload):
    """Test each operation's method, endpoint and payload."""
    call(client)

    kwargs = last_call(mock_http_client)
    body = kwargs.get("params") if method == "GET" else kwargs.get("json")
    assert kwargs["method"] == method
    assert kwargs["url"] == f"https://api.ontraport.com/1{endpoint}"
    assert body == {**payload, "objectID": "0"}


def test_operation_does_not_mutate_params(client):
    """Test caller payloads are left unchanged."""
    params = {"firstname": "X"}
    client.update_object("contact", 5, params)

    assert params == {"firstname": "X"}


def test_tag_objects_normalizes_lists(client, mock_http_client):
    """Test list-valued tag parameters are comma-joined."""
    client.tag_objects(ObjectType.CONTACT, {"add_list": [11111, 22222], "ids": 33333})

    assert last_call(mock_http_client)["json"] == {
        "add_list": "11111,22222",
        "ids": "33333",
        "objectID": "0",
    }


def test_untag_objects_normalizes_lists(client, mock_http_client):
    """Test list-valued untag parameters are comma-joined."""
    client.untag_objects("contact", {"remove_list": [1, 2], "ids": [3, 4]})

    assert last_call(mock_http_client)["json"] == {
        "remove_list": "1,2",
        "ids": "3,4",
        "objectID": "0",
    }


def test_add_subscription(client, mock_http_client):
    """Test add_subscription payload and verb."""
    client.add_subscription("contact", 12345, [150, 200])

    kwargs = last_call(mock_http_client)
    assert kwargs["method"] == "PUT"
    assert kwargs["url"] == "https://api.ontraport.com/1/objects/subscribe"
    assert kwargs["json"] == {
        "ids": "12345",
        "sub_type": "Campaign",
        "add_list": "150,200",
        "objectID": "0",
    }


def test_add_subscription_with_extra_params(client, mock_http_client):
    """Test sub_type and extra params are included."""
    client.add_subscription("contact", [1, 2], 150, "Sequence", {"range": 5})

    assert last_call(mock_http_client)["json"] == {
        "range": 5,
        "ids": "1,2",
        "sub_type": "Sequence",
        "add_list": "150",
        "objectID": "0",
    }


def test_remove_subscription(client, mock_http_client):
    """Test remove_subscription payload and verb."""
    client.remove_subscription("contact", [12345], (150, 200))

    kwargs = last_call(mock_http_client)
    assert kwargs["method"] == "DELETE"
    assert kwargs["url"] == "https://api.ontraport.com/1/objects/subscribe"
    assert kwargs["json"] == {
        "ids": "12345",
        "sub_type": "Campaign",
        "remove_list": "150,200",
        "objectID": "0",
    }


def test_tag_by_name(client, mock_http_client):
    """Test tag_by_name sends split lists."""
    client.tag_by_name("contact", "1,2", "VIP,Newsletter")

    kwargs = last_call(mock_http_client)
    assert kwargs["method"] == "PUT"
    assert kwargs["url"] == "https://api.ontraport.com/1/objects/tagByName"
    assert kwargs["json"] == {
        "ids": ["1", "2"],
        "add_names": ["VIP", "Newsletter"],
        "objectID": "0",
    }


def test_get_order_skips_schema(client, mock_http_client):
    """Test get_order sends one request without objectID."""
    client.get_order(99)

    assert mock_http_client.request.call_count == 1
    kwargs = last_call(mock_http_client)
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "https://api.ontraport.com/1/transaction/order"
    assert kwargs["params"] == {"id": 99}


def test_resolves_custom_object_id(client, mock_http_client):
    """Test custom objects resolve to their own id."""
    client.get_objects("Custom Widget")

    assert last_call(mock_http_client)["params"] == {"objectID": "10000"}


# ===== Schema Tests =====

def test_metadata_fetched_once_across_calls(client, mock_http_client):
    """Test at most one metadata fetch per cache lifetime."""
    client.get_object("contact", 1)
    client.get_object("tag", 2)

    urls = [c[1]["url"] for c in mock_http_client.request.call_args_list]
    assert urls.count("https://api.ontraport.com/1/objects/meta") == 1
    assert len(urls) == 3


def test_clear_describe_cache_refetches(client, mock_http_client):
    """Test clearing the cache causes a new metadata fetch."""
    client.get_object("contact", 1)
    client.clear_describe_cache()
    client.get_object("contact", 1)

    urls = [c[1]["url"] for c in mock_http_client.request.call_args_list]
    assert urls.count("https://api.ontraport.com/1/objects/meta") == 2


def test_describe(client):
    """Test describe returns metadata with the schema object id."""
    metadata = client.describe(ObjectType.CONTACT)

    assert metadata.name == "Contact"
    assert metadata.schema_object_id == "0"
    assert "email" in metadata.fields


def test_unknown_object_type_sends_no_object_request(client, mock_http_client):
    """Test ObjectNotFoundError is raised before the object request."""
    with pytest.raises(ObjectNotFoundError):
        client.create("spaceship", {"name": "x"})

    assert object_calls(mock_http_client) == []


def test_invalid_object_type_sends_nothing(client, mock_http_client):
    """Test InvalidArgumentError is raised before any request."""
    with pytest.raises(InvalidArgumentError):
        client.get_object(None, 1)

    mock_http_client.request.assert_not_called()


def test_metadata_error_propagates(configuration, mock_http_client):
    """Test a failed metadata fetch raises APIError."""
    mock_http_client.request.return_value = make_response(
        status_code=401, reason_phrase="Unauthorized", text="Invalid API key"
    )
    client = OntraportClient(configuration, http_client=mock_http_client)

    with pytest.raises(APIError) as exc_info:
        client.get_object("contact", 1)

    assert exc_info.value.status_code == 401
    assert mock_http_client.request.call_count == 1
