"""
Selectors decide which endpoint of a resource an accessor call targets.

A selector is chosen once, when the collection is built:

- ``AllSelector``: the collection listing (``users``)
- ``IdSelector``: one record (``users/123``)
- ``QuerySelector``: a free-text search over the listing (``users?query=Bob``)
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from helpdesk_client.exceptions import InvalidSelectorError


class AllSelector(BaseModel):
    model_config = ConfigDict(frozen=True)

    def apply(self, resource: str, query: Dict[str, Any]) -> None:
        query["path"] = resource


class IdSelector(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int

    def apply(self, resource: str, query: Dict[str, Any]) -> None:
        query["path"] = f"{resource}/{self.id}"


class QuerySelector(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str

    def apply(self, resource: str, query: Dict[str, Any]) -> None:
        query["path"] = resource
        query["query"] = self.text


Selector = Union[AllSelector, IdSelector, QuerySelector]


def parse_selector(value: Optional[Any]) -> Selector:
    """
    Classify the positional argument of a resource accessor.

    Raises:
        InvalidSelectorError: If ``value`` is not None, an int or a str
    """
    if value is None:
        return AllSelector()
    # bool is an int subclass but never a record id
    if isinstance(value, bool):
        raise InvalidSelectorError(value)
    if isinstance(value, int):
        return IdSelector(id=value)
    if isinstance(value, str):
        return QuerySelector(text=value)
    raise InvalidSelectorError(value)
