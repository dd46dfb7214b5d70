"""
Tokenizer for page text and query terms.

Pipeline:
1. Lowercase
2. Extract alphanumeric words (hyphens inside words kept)
3. Drop stopwords and pure numbers
4. Stem ("languages" → "languag")
"""

import re
from typing import List

from .stemmer import stem

STOPWORDS = frozenset([
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'but', 'by',
    'for', 'if', 'in', 'into', 'is', 'it',
    'no', 'not', 'of', 'on', 'or', 'such',
    'that', 'the', 'their', 'then', 'there', 'these',
    'they', 'this', 'to', 'was', 'will', 'with'
])

_WORD_RE = re.compile(r'\b[a-z0-9]+(?:-[a-z0-9]+)*\b')
_NUMBER_RE = re.compile(r'^[0-9-]+$')


def tokenize(text: str) -> List[str]:
    """
    Split text into index terms.
    
    Args:
        text: Page text or query term
        
    Returns:
        List of stemmed lowercase tokens, in text order, duplicates kept
        
    Examples:
        >>> tokenize("Java is a programming language")
        ['java', 'program', 'languag']
        
        >>> tokenize("Released in 1995")
        ['releas']
        
        >>> tokenize("   ")
        []
    """
    if not text:
        return []
    
    tokens = _WORD_RE.findall(text.lower())
    
    tokens = [
        t for t in tokens
        if t not in STOPWORDS and not _NUMBER_RE.match(t)
    ]
    
    return [stem(t) for t in tokens]
