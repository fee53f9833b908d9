"""
Plumbing shared by the resource services.

Each service holds the client it was created by and talks to the API
through client.get().
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, Optional, TypeVar

from whoop_sdk.models import Page
from whoop_sdk.params import RequestParams, add_params

if TYPE_CHECKING:
    from whoop_sdk.client import WhoopClient

T = TypeVar("T")


class Service:
    def __init__(self, client: "WhoopClient"):
        self._client = client

    def _get(self, path: str, record: Callable[[Dict[str, Any]], T]) -> T:
        return self._client.get(path, record)

    def _list(
        self,
        endpoint: str,
        params: Optional[RequestParams],
        record: Callable[[Dict[str, Any]], T],
    ) -> Page[T]:
        path = add_params(endpoint, params)
        return self._client.get(path, lambda d: Page.from_dict(d, record))


class CollectionService(Service, ABC):
    """A service whose endpoint returns paginated records."""

    @abstractmethod
    def list_all(self, params: Optional[RequestParams] = None) -> Page:
        """Fetch one page of the collection."""

    def iter_all(self, params: Optional[RequestParams] = None) -> Iterator:
        """
        Yield every record, following nextToken from page to page.

        Each page is a separate request and is subject to the rate limit
        check; an error stops the iteration.
        """
        params = params or RequestParams()
        while True:
            page = self.list_all(params)
            yield from page.records
            if not page.next_token:
                return
            params = replace(params, next_token=page.next_token)
