"""Unit test fixtures - small hand-built results and an in-memory index"""

import pytest

from wikisearch.indexing import InMemoryIndex
from wikisearch.search import Index, QueryResult


class DictIndex(Index):
    """Index backed by a fixed {term: {doc_id: score}} dict"""
    
    def __init__(self, postings):
        self.postings = postings
        self.lookups = []
    
    def lookup(self, term):
        self.lookups.append(term)
        return self.postings.get(term, {})


@pytest.fixture
def java():
    """Term "java" hits urlX twice and urlY once"""
    return QueryResult.from_map({"urlX": 2, "urlY": 1})


@pytest.fixture
def programming():
    """Term "programming" hits urlY three times and urlZ once"""
    return QueryResult.from_map({"urlY": 3, "urlZ": 1})


@pytest.fixture
def dict_index():
    return DictIndex({
        "java": {"urlX": 2, "urlY": 1},
        "programming": {"urlY": 3, "urlZ": 1},
    })


@pytest.fixture
def wiki_index():
    """Three short pages indexed by name"""
    index = InMemoryIndex()
    index.add_document(
        "Java_(programming_language)",
        "Java is a programming language. Java programs run on the Java virtual machine."
    )
    index.add_document(
        "Python_(programming_language)",
        "Python is a programming language. Programming in Python is popular."
    )
    index.add_document(
        "Java_(island)",
        "Java is an island of Indonesia."
    )
    return index
