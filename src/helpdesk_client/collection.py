"""
Base class for resource collections.

A collection is a request that has not been sent yet. Accessor calls
such as ``client.users(123)`` build one, chained calls refine its path
and options in place, and a terminal call (``fetch``, ``create``,
``update`` or ``delete``) hands it to the client for dispatch.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, List, Optional, Protocol, Union

from pydantic import BaseModel

from helpdesk_client.exceptions import InvalidSelectorError
from helpdesk_client.selectors import Selector, parse_selector


class Dispatcher(Protocol):
    """The client operations a collection dispatches through."""

    def do_get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any: ...

    def do_post(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any: ...

    def do_put(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any: ...

    def do_delete(self, path: str, options: Optional[Dict[str, Any]] = None) -> Any: ...


Payload = Union[Mapping, BaseModel, Callable[[Dict[str, Any]], Any], None]


class Collection:
    """
    In-progress request configuration for one resource.

    Subclasses set ``resource`` (the path prefix, e.g. ``"users"``) and
    ``resource_key`` (the body wrapper key, e.g. ``"user"``).

    Chained calls mutate ``query`` and return the same object, so a
    collection must not be shared between unrelated chains.
    """

    resource: str = ""
    resource_key: str = ""

    def __init__(self, client: Dispatcher, *args: Any):
        """
        Args:
            client: Object providing do_get/do_post/do_put/do_delete
            *args: Optional selector (int id or str search text),
                optionally followed by a mapping of extra options
        """
        self._client = client

        args = list(args)
        self.query: Dict[str, Any] = dict(args.pop()) if args and isinstance(args[-1], Mapping) else {}

        if len(args) > 1:
            raise InvalidSelectorError(
                tuple(args),
                message=f"{self.resource} accepts at most one selector, got {len(args)}",
            )

        self.selector: Selector = parse_selector(args[0] if args else None)
        self.selector.apply(self.resource, self.query)

    @property
    def path(self) -> str:
        return self.query["path"]

    def _append(self, suffix: str) -> "Collection":
        self.query["path"] = f"{self.path}/{suffix}"
        return self

    def options(self) -> Dict[str, Any]:
        """Accumulated options without the path."""
        return {k: v for k, v in self.query.items() if k != "path"}

    # =========================================================================
    # Paging
    # =========================================================================

    def per_page(self, count: int) -> "Collection":
        self.query["per_page"] = count
        return self

    def page(self, number: int) -> "Collection":
        self.query["page"] = number
        return self

    # =========================================================================
    # Terminal actions
    # =========================================================================

    def fetch(self) -> Any:
        """GET the accumulated path with the options as query parameters."""
        return self._client.do_get(self.path, self.options())

    def create(self, data: Payload = None) -> Any:
        """POST ``{resource_key: data}`` merged with the accumulated options."""
        return self._client.do_post(self.path, self._body(data))

    def update(self, data: Payload = None) -> Any:
        """PUT ``{resource_key: data}`` merged with the accumulated options."""
        return self._client.do_put(self.path, self._body(data))

    def delete(self, options: Optional[Mapping] = None) -> Any:
        """DELETE the accumulated path with ``options`` as query parameters."""
        return self._client.do_delete(self.path, dict(options or {}))

    def _body(self, data: Payload) -> Dict[str, Any]:
        body = self.options()
        body[self.resource_key] = self._payload(data)
        return body

    @staticmethod
    def _payload(data: Payload) -> Dict[str, Any]:
        """Normalize create/update data: mapping, pydantic model or configurator callable."""
        if data is None:
            return {}
        if isinstance(data, BaseModel):
            return data.model_dump(mode="json", exclude_none=True)
        if callable(data):
            payload: Dict[str, Any] = {}
            data(payload)
            return payload
        return dict(data)

    # =========================================================================
    # Iteration
    # =========================================================================

    def records(self, data: Any) -> List[Any]:
        """Extract the records from a fetched response."""
        if isinstance(data, list):
            return data
        if not isinstance(data, dict):
            return []

        for key in (self.path.rsplit("/", 1)[-1], self.resource, self.resource_key):
            value = data.get(key)
            if isinstance(value, list):
                return value
            if isinstance(value, dict):
                return [value]
        return []

    def __iter__(self) -> Iterator[Any]:
        return iter(self.records(self.fetch()))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path!r}, options={self.options()!r})"
