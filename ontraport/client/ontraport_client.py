"""
ONTRAPORT Client Implementation

Maps the object and transaction endpoints of the ONTRAPORT API onto
method calls. Every object call resolves the numeric object type id
through the schema cache before sending its request.
"""

import logging
from typing import Any

import httpx

from ..core.models import Configuration, ObjectMetadata, ObjectType
from ..core.schema import SchemaCache, META_ENDPOINT
from .params import join_list, split_list, normalize_list_params
from .response import Response
from .transport import Transport

logger = logging.getLogger(__name__)


class OntraportClient:
    """
    Client for the ONTRAPORT objects API.

    Object types are given as ObjectType members or names
    ("contact", "Company", ...); custom objects are addressed by name.

    Example:
        >>> with OntraportClient(Configuration("app-id", "key")) as client:
        ...     client.create(ObjectType.CONTACT, {"email": "foo@bar.com"})
    """

    def __init__(
        self,
        configuration: Configuration,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the client.

        Args:
            configuration: Credentials and connection settings
            http_client: Optional httpx client (created if None)
        """
        self.configuration = configuration
        self.transport = Transport(configuration, http_client=http_client)
        self.schema = SchemaCache(lambda: self.transport.send("GET", META_ENDPOINT))

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager cleanup."""
        self.close()
        return False

    def describe(self, object_type: ObjectType | str) -> ObjectMetadata:
        """
        Describe an object type, including its numeric id and available fields.

        Raises:
            InvalidArgumentError: If object_type is not a valid type name
            ObjectNotFoundError: If no object in the schema matches
        """
        return self.schema.describe(object_type)

    def clear_describe_cache(self) -> None:
        """
        Clear cached object metadata.

        Use after changing custom fields or objects in the ONTRAPORT account.
        """
        self.schema.clear()

    def _objects_call(
        self,
        method: str,
        object_type: ObjectType | str,
        endpoint: str,
        data: dict[str, Any] | None = None,
    ) -> Response:
        metadata = self.describe(object_type)
        payload = dict(data or {})
        payload["objectID"] = metadata.schema_object_id

        return self.transport.send(method, endpoint, payload)

    # ===== OBJECTS METHODS =====

    def get_object(self, object_type: ObjectType | str, id: int | str) -> Response:
        """
        Retrieve a single object of the specified type.

        Args:
            object_type: The type of object, e.g. ObjectType.CONTACT
            id: Id of the record

        Returns:
            Response with the record under "data"
        """
        return self._objects_call("GET", object_type, "/object", {"id": id})

    def get_objects(
        self,
        object_type: ObjectType | str,
        params: dict[str, Any] | None = None,
    ) -> Response:
        """
        Retrieve a collection of objects matching the query parameters.

        Args:
            object_type: The type of object
            params: Query parameters, e.g. {"condition": "...", "sort": "lastname"}

        Returns:
            Response with the matching records under "data"
        """
        return self._objects_call(
            "GET", object_type, "/objects", normalize_list_params(params or {})
        )

    def create(self, object_type: ObjectType | str, params: dict[str, Any]) -> Response:
        """
        Create an object with the given data.

        Args:
            object_type: The type of object
            params: Field values, e.g. {"email": "foo@bar.com", "firstname": "Foo"}
        """
        return self._objects_call("POST", object_type, "/objects", params)

    def save_or_update(self, object_type: ObjectType | str, params: dict[str, Any]) -> Response:
        """
        Create an object, or merge it into the row whose unique field matches.

        Args:
            object_type: The type of object
            params: Field values
        """
        return self._objects_call("POST", object_type, "/objects/saveorupdate", params)

    def update_object(
        self,
        object_type: ObjectType | str,
        id: int | str,
        params: dict[str, Any],
    ) -> Response:
        """
        Update a single row.

        Args:
            object_type: The type of object
            id: Id of the record
            params: Changes. Use describe() for the available fields.
        """
        return self._objects_call("PUT", object_type, "/objects", {**params, "id": id})

    def tag_objects(self, object_type: ObjectType | str, params: dict[str, Any]) -> Response:
        """
        Add tags to objects matching the supplied conditions.

        add_list (the tag ids) is required; ids may restrict the objects
        tagged. Both accept a single id or a sequence of ids.

        Example:
            >>> client.tag_objects("contact", {"add_list": [11111, 22222], "ids": "33333"})
        """
        return self._objects_call(
            "PUT", object_type, "/objects/tag", normalize_list_params(params)
        )

    def untag_objects(self, object_type: ObjectType | str, params: dict[str, Any]) -> Response:
        """
        Remove tags from objects matching the supplied conditions.

        Same interface as tag_objects(), with remove_list in place of add_list.
        """
        return self._objects_call(
            "DELETE", object_type, "/objects/tag", normalize_list_params(params)
        )

    def add_subscription(
        self,
        object_type: ObjectType | str,
        ids: Any,
        add_list: Any,
        sub_type: str = "Campaign",
        params: dict[str, Any] | None = None,
    ) -> Response:
        """
        Subscribe objects to campaigns or sequences.

        Args:
            object_type: The type of object
            ids: Id or sequence of ids of the objects to subscribe
            add_list: Id or sequence of ids of the campaigns or sequences
            sub_type: "Campaign" or "Sequence"
            params: Extra request data
        """
        data = {
            **(params or {}),
            "ids": join_list(ids),
            "sub_type": sub_type,
            "add_list": join_list(add_list),
        }
        return self._objects_call("PUT", object_type, "/objects/subscribe", data)

    def remove_subscription(
        self,
        object_type: ObjectType | str,
        ids: Any,
        remove_list: Any,
        sub_type: str = "Campaign",
        params: dict[str, Any] | None = None,
    ) -> Response:
        """
        Unsubscribe objects from campaigns or sequences.

        Args:
            object_type: The type of object
            ids: Id or sequence of ids of the objects to unsubscribe
            remove_list: Id or sequence of ids of the campaigns or sequences
            sub_type: "Campaign" or "Sequence"
            params: Extra request data
        """
        data = {
            **(params or {}),
            "ids": join_list(ids),
            "sub_type": sub_type,
            "remove_list": join_list(remove_list),
        }
        return self._objects_call("DELETE", object_type, "/objects/subscribe", data)

    def tag_by_name(
        self,
        object_type: ObjectType | str,
        ids: Any,
        add_names: Any,
        params: dict[str, Any] | None = None,
    ) -> Response:
        """
        Add tags by name, creating any tag that does not exist yet.

        ids and add_names are sent as lists; comma-delimited strings are split.
        """
        data = {
            **(params or {}),
            "ids": split_list(ids),
            "add_names": split_list(add_names),
        }
        return self._objects_call("PUT", object_type, "/objects/tagByName", data)

    # ===== TRANSACTIONS METHODS =====

    def get_order(self, order_id: int | str) -> Response:
        """
        Get full information about an order.

        Args:
            order_id: Id of the order
        """
        return self.transport.send("GET", "/transaction/order", {"id": order_id})
