"""
Search results and the boolean algebra over them.

A QueryResult maps document identifiers (URLs) to relevance scores. Results
for single terms come from an Index lookup; multi-term queries are answered by
folding those results together:

    java | programming      # OR:    documents matching either term
    java & programming      # AND:   documents matching both terms
    java - programming      # MINUS: documents matching java but not programming

Scores of documents present in both operands are combined with
`QueryResult.combine` (sum of term frequencies by default), so a document
matching more terms ranks higher.

Instances are immutable: every operation returns a new QueryResult, which makes
results safe to reuse as operands and to share between threads.
"""

import logging
import sys
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, TextIO, Tuple

from .relevance import total_relevance

logger = logging.getLogger(__name__)

DocumentID = str
Score = int


class InvalidScore(ValueError):
    """Raised when a relevance map contains a negative score"""


class QueryResult:
    """
    Immutable mapping from DocumentID to relevance score.

    Absent documents have score 0, so zero entries are never stored.
    """

    __slots__ = ("_scores",)

    def __init__(self, scores: Optional[Mapping[DocumentID, Score]] = None):
        """
        Wrap a relevance map.

        The mapping is copied, later changes to the caller's dict do not leak in.

        Args:
            scores: Mapping {doc_id: score}, typically the output of Index.lookup()

        Raises:
            InvalidScore: If any score is negative
        """
        copied: Dict[DocumentID, Score] = {}
        for doc_id, score in (scores or {}).items():
            if score < 0:
                raise InvalidScore(f"Negative relevance score for {doc_id!r}: {score}")
            if score:
                copied[doc_id] = score
        object.__setattr__(self, "_scores", MappingProxyType(copied))

    @classmethod
    def from_map(cls, scores: Mapping[DocumentID, Score]) -> "QueryResult":
        """Build a result from a {doc_id: score} mapping"""
        return cls(scores)

    @classmethod
    def search(cls, term: str, index) -> "QueryResult":
        """
        Look up a single term and wrap the matches.

        Args:
            term: Search term
            index: Any object with lookup(term) -> {doc_id: score}
        """
        return cls.from_map(index.lookup(term))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (dict(self._scores),))

    @property
    def scores(self) -> Mapping[DocumentID, Score]:
        """Read-only view of the relevance map"""
        return self._scores

    def relevance(self, doc_id: DocumentID) -> Score:
        """
        Look up the relevance of a document.

        Returns:
            Score for doc_id, or 0 if the document is not in this result
        """
        return self._scores.get(doc_id, 0)

    score = relevance

    def combine(self, rel1: Score, rel2: Score) -> Score:
        """
        Relevance of a document given its score in two results.

        Override in a subclass to change the ranking policy for all
        set operations at once.
        """
        return total_relevance(rel1, rel2)

    def union(self, other: "QueryResult") -> "QueryResult":
        """
        Documents matching either query (OR).

        Example:
            >>> QueryResult({"x": 2, "y": 1}).union(QueryResult({"y": 3, "z": 1}))
            QueryResult({'x': 2, 'y': 4, 'z': 1})
        """
        self._check_operand(other)

        union: Dict[DocumentID, Score] = {}
        for doc_id, rel in self._scores.items():
            union[doc_id] = self.combine(rel, other.relevance(doc_id))

        # Shared documents were already combined above
        for doc_id, rel in other._scores.items():
            if doc_id not in union:
                union[doc_id] = self.combine(0, rel)

        return self._derive("union", other, union)

    def intersect(self, other: "QueryResult") -> "QueryResult":
        """
        Documents matching both queries (AND).

        Documents present in only one operand are dropped entirely.
        """
        self._check_operand(other)

        inter = {
            doc_id: self.combine(rel, other.relevance(doc_id))
            for doc_id, rel in self._scores.items()
            if doc_id in other._scores
        }
        return self._derive("intersect", other, inter)

    def difference(self, other: "QueryResult") -> "QueryResult":
        """
        Documents matching this query but not the other (MINUS / NOT).

        This filters by absence in `other`; it is not a score subtraction.
        Kept documents carry their score from `self` unchanged.
        """
        self._check_operand(other)

        diff = {
            doc_id: rel
            for doc_id, rel in self._scores.items()
            if doc_id not in other._scores
        }
        return self._derive("difference", other, diff)

    def ranked(self) -> List[Tuple[DocumentID, Score]]:
        """
        Entries sorted by ascending relevance.

        Ties keep the insertion order of the underlying map (sorted() is stable),
        so repeated calls always produce the same list.

        Example:
            >>> QueryResult({"a": 3, "b": 1, "c": 2}).ranked()
            [('b', 1), ('c', 2), ('a', 3)]
        """
        return sorted(self._scores.items(), key=lambda entry: entry[1])

    def print_ranked(self, file: Optional[TextIO] = None) -> None:
        """Print one `doc_id=score` line per entry, lowest relevance first"""
        out = file if file is not None else sys.stdout
        for doc_id, score in self.ranked():
            print(f"{doc_id}={score}", file=out)

    def _check_operand(self, other) -> None:
        if not isinstance(other, QueryResult):
            raise TypeError(
                f"Expected QueryResult operand, got {type(other).__name__}"
            )

    def _derive(self, op: str, other: "QueryResult", scores: Dict[DocumentID, Score]) -> "QueryResult":
        logger.debug(f"{op}: {len(self)} x {len(other)} -> {len(scores)} documents")
        return type(self)(scores)

    # Operator aliases: a | b, a & b, a - b

    def __or__(self, other):
        if not isinstance(other, QueryResult):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, QueryResult):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other):
        if not isinstance(other, QueryResult):
            return NotImplemented
        return self.difference(other)

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, doc_id) -> bool:
        return doc_id in self._scores

    def __iter__(self) -> Iterator[DocumentID]:
        return iter(self._scores)

    def __eq__(self, other) -> bool:
        if not isinstance(other, QueryResult):
            return NotImplemented
        return dict(self._scores) == dict(other._scores)

    def __hash__(self) -> int:
        return hash(frozenset(self._scores.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._scores)!r})"
