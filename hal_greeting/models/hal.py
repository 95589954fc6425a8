# hal_greeting/models/hal.py

from typing import Dict, List, Tuple

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

HAL_JSON = "application/hal+json"


class HalJSONResponse(JSONResponse):
    media_type = HAL_JSON


class Link(BaseModel):
    href: str


class HalResource(BaseModel):
    """
    Base for HAL representations. Links live in a plain ordered mapping
    (relation -> Link) and go over the wire as `_links`.
    """

    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")

    model_config = ConfigDict(populate_by_name=True)

    def add_link(self, rel: str, href: str) -> "HalResource":
        if rel in self.links:
            raise ValueError(f"relation already present: {rel}")
        self.links[rel] = Link(href=href)
        return self

    def get_link(self, rel: str) -> Link:
        return self.links[rel]

    def link_pairs(self) -> List[Tuple[str, str]]:
        return [(rel, link.href) for rel, link in self.links.items()]

    def to_hal(self) -> dict:
        """Wire form of the resource, as clients receive it."""
        return self.model_dump(by_alias=True)
