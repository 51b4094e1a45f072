"""Knowledge lookup: query term -> best-match answer.

Public API:
    KnowledgeGraphResolver(client, api_key)(term) -> str | None
        Searches the Knowledge Graph and returns the top entity's article URL.
        Raises LookupFailure when the search cannot complete.
"""

from slash_lookup.lookup.knowledge_graph import KnowledgeGraphResolver
from slash_lookup.lookup.schemas import SearchResponse

__all__ = [
    "KnowledgeGraphResolver",
    "SearchResponse",
]
