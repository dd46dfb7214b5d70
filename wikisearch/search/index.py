"""
Index collaborator contract.

The result algebra only needs one capability from an inverted index:
"give me the {doc_id: score} map for this term". Storage, tokenization and
connection handling all live behind this interface.
"""

import logging
from abc import ABC, abstractmethod
from typing import Mapping

from .query_result import DocumentID, QueryResult, Score

logger = logging.getLogger(__name__)


class Index(ABC):
    """
    Abstract base class for term lookups.
    
    All indexes must implement this interface to be swappable.
    """
    
    @abstractmethod
    def lookup(self, term: str) -> Mapping[DocumentID, Score]:
        """
        Get relevance scores of every document containing a term.
        
        Args:
            term: Search term
            
        Returns:
            Mapping {doc_id: score}
            Empty mapping (not an error) if the term matches nothing
        """
        pass


def search(term: str, index: Index) -> QueryResult:
    """
    Perform a single-term search.
    
    Args:
        term: Search term
        index: Index to query
    
    Returns:
        QueryResult with the term's matches
    """
    result = QueryResult.search(term, index)
    logger.debug(f"search({term!r}): {len(result)} documents")
    return result
