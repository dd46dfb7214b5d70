"""
Boolean search over per-term relevance maps.

Components:
- query_result: Immutable QueryResult with union/intersect/difference and ranking
- relevance: Scoring policy for documents matched by several terms
- index: Index lookup contract and single-term search helper

Usage:
    from wikisearch.search import search

    java = search("java", index)
    programming = search("programming", index)
    for url, score in (java & programming).ranked():
        print(url, score)
"""

from .relevance import total_relevance
from .query_result import DocumentID, InvalidScore, QueryResult, Score
from .index import Index, search

__all__ = [
    "DocumentID",
    "Score",
    "QueryResult",
    "InvalidScore",
    "total_relevance",
    "Index",
    "search",
]
