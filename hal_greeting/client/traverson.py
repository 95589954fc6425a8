# hal_greeting/client/traverson.py

"""
Hypermedia traversal client for HAL services.

Starts at a root URI and follows named relations through `_links` instead
of hard-coding URIs:

    with Traverson("http://localhost:8080/greeting") as traverson:
        traverson.follow("self").to_object()["content"]

Any httpx.Client works as transport, including FastAPI's TestClient.
Relative hrefs are resolved against the resource that carries them.
"""

import logging
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel

from hal_greeting.models.hal import HAL_JSON

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class LinkNotFoundError(LookupError):
    def __init__(self, rel: str, url: str, available):
        self.rel = rel
        self.url = url
        self.available = list(available)
        super().__init__(f"no '{rel}' link in resource at {url} (available: {', '.join(self.available) or 'none'})")


class Traverson:

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.Client] = None,
        rels: Tuple[str, ...] = (),
    ):
        self.base_url = base_url
        # only a client created here is closed by close()
        self._owns_client = client is None
        self.client = client or httpx.Client()
        self.rels = rels

    def __enter__(self) -> "Traverson":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def follow(self, *rels: str) -> "Traverson":
        # shares the client without taking ownership of it
        return Traverson(self.base_url, client=self.client, rels=self.rels + rels)

    def _get(self, url: str) -> Dict[str, Any]:
        response = self.client.get(url, headers={"Accept": HAL_JSON})
        response.raise_for_status()
        return response.json()

    def to_object(self) -> Dict[str, Any]:
        url = self.base_url
        document = self._get(url)
        for rel in self.rels:
            links = document.get("_links") or {}
            if rel not in links:
                raise LinkNotFoundError(rel, url, links.keys())
            url = str(httpx.URL(url).join(links[rel]["href"]))
            logger.debug("following '%s' -> %s", rel, url)
            document = self._get(url)
        return document

    def to_entity(self, model: Type[M]) -> M:
        return model.model_validate(self.to_object())
