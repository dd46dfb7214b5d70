"""
Snowball stemmer for English (via NLTK).

Page text and query terms must meet at the same index term, otherwise a
search for "programs" would miss a page that says "programming". Both go
through this one stemmer, so the two forms share the stem "program".
"""

from nltk.stem.snowball import SnowballStemmer

# Stateless after construction, safe to share
_stemmer = SnowballStemmer('english')


def stem(word: str) -> str:
    """
    Stem a single lowercase word.
    
    Examples:
        >>> stem("programming")
        'program'
        >>> stem("languages")
        'languag'
    """
    return _stemmer.stem(word)
