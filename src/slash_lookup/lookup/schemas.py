"""Pydantic models for the Knowledge Graph Search API response.

Only the fields the resolver reads are modelled; everything else in the
JSON-LD payload is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class DetailedDescription(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str | None = None
    article_body: str | None = Field(default=None, alias="articleBody")


class Entity(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    description: str | None = None
    detailed_description: DetailedDescription | None = Field(
        default=None, alias="detailedDescription"
    )


class SearchElement(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    result: Entity
    result_score: float | None = Field(default=None, alias="resultScore")


class SearchResponse(BaseModel):
    """Top-level ``entities:search`` response."""

    model_config = ConfigDict(populate_by_name=True)

    item_list_element: list[SearchElement] = Field(
        default_factory=list, alias="itemListElement"
    )

    def best_match_url(self) -> str | None:
        """Article URL of the highest-ranked entity, if it has one."""
        if not self.item_list_element:
            return None
        details = self.item_list_element[0].result.detailed_description
        if details is None:
            return None
        return details.url or None
