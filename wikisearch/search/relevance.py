"""
Relevance combination policy.

Every set operation on QueryResult funnels scores of a shared document
through one function, so swapping the policy only touches this point.
"""


def total_relevance(rel1: int, rel2: int) -> int:
    """
    Combine the relevance of one document from two searches.
    
    Args:
        rel1: Score from the first search (0 if absent)
        rel2: Score from the second search (0 if absent)
    
    Returns:
        Sum of both term frequencies
    
    Examples:
        >>> total_relevance(2, 3)
        5
        >>> total_relevance(4, 0)
        4
    """
    return rel1 + rel2
