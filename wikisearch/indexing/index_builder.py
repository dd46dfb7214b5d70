"""
In-memory inverted index of term counts.

Maps each stemmed term to {doc_id: number of occurrences}. Process-local and
unpersisted; used by the demo and tests as the Index behind QueryResult.
"""

import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Union

from ..search.index import Index
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def count_terms(text: str) -> Dict[str, int]:
    """
    Term frequencies of a single document.
    
    Example:
        >>> count_terms("Java programs. Programming in Java.")
        {'java': 2, 'program': 2}
    """
    term_frequencies = defaultdict(int)
    for term in tokenize(text):
        term_frequencies[term] += 1
    return dict(term_frequencies)


class InMemoryIndex(Index):
    """Term → {doc_id: count} index held in a dict"""
    
    def __init__(self):
        self._postings: Dict[str, Dict[str, int]] = defaultdict(dict)
        self._documents: Dict[str, Dict[str, int]] = {}
    
    def add_document(self, doc_id: str, text: str) -> None:
        """
        Index one document.
        
        Re-adding an existing doc_id replaces its previous term counts.
        """
        if doc_id in self._documents:
            self._remove(doc_id)
        
        counts = count_terms(text)
        self._documents[doc_id] = counts
        for term, count in counts.items():
            self._postings[term][doc_id] = count
        
        logger.debug(f"Indexed {doc_id}: {len(counts)} unique terms")
    
    def lookup(self, term: str) -> Dict[str, int]:
        """
        Documents containing a term, with its count in each.
        
        The term is normalised like page text, so "Programming" finds
        "programming". Only the first token of a multi-word term is used.
        
        Returns:
            Fresh {doc_id: count} dict, empty for unknown terms
        """
        tokens = tokenize(term)
        if not tokens:
            return {}
        if len(tokens) > 1:
            logger.warning(f"Multi-word term {term!r}: looking up {tokens[0]!r} only")
        
        postings = self._postings.get(tokens[0])
        return dict(postings) if postings else {}
    
    def terms(self) -> List[str]:
        """Indexed vocabulary, sorted"""
        return sorted(term for term, postings in self._postings.items() if postings)
    
    def __len__(self) -> int:
        return len(self._documents)
    
    def _remove(self, doc_id: str) -> None:
        for term in self._documents.pop(doc_id):
            postings = self._postings[term]
            postings.pop(doc_id, None)
            if not postings:
                del self._postings[term]
    
    @classmethod
    def from_directory(cls, path: Union[str, Path], pattern: str = "*.txt") -> "InMemoryIndex":
        """
        Index every matching file in a directory.
        
        Args:
            path: Directory with documents
            pattern: Glob for file names (default: *.txt)
        
        Returns:
            Index keyed by file name
            Files that cannot be read as UTF-8 are logged and skipped
        
        Raises:
            NotADirectoryError: If path is not an existing directory
        """
        directory = Path(path)
        if not directory.is_dir():
            raise NotADirectoryError(f"Documents directory not found: {directory}")
        
        index = cls()
        for file_path in sorted(directory.glob(pattern)):
            if not file_path.is_file():
                continue
            try:
                text = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping unreadable document {file_path.name}: {e}")
                continue
            index.add_document(file_path.name, text)
        
        logger.info(f"Indexed {len(index)} documents from {directory}")
        return index
