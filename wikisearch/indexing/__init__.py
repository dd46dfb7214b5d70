"""
Text processing and a process-local term-count index.

Components:
- tokenizer: Lowercase, split, drop stopwords and numbers, stem
- stemmer: Snowball stemming via NLTK
- index_builder: InMemoryIndex implementing the search Index contract
"""

from .stemmer import stem
from .tokenizer import tokenize
from .index_builder import InMemoryIndex, count_terms

__all__ = [
    "stem",
    "tokenize",
    "count_terms",
    "InMemoryIndex",
]
