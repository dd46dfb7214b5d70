"""
Unit tests for the demo entry point.
"""

import io
import logging
import os

import pytest

from wikisearch import main as demo


@pytest.fixture
def isolated_logging(tmp_path, monkeypatch):
    """Send demo logs to tmp_path and restore root handlers afterwards"""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "wikisearch.log"))
    monkeypatch.setattr(demo, "load_environment", lambda: None)
    
    yield tmp_path
    
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


class TestRunDemo:
    """Test printed query output"""
    
    def test_output_sections(self, dict_index):
        out = io.StringIO()
        
        intersection = demo.run_demo("java", "programming", dict_index, out=out)
        
        assert intersection.scores == {"urlY": 4}
        assert out.getvalue().splitlines() == [
            "Query: java",
            "urlY=1",
            "urlX=2",
            "Query: programming",
            "urlZ=1",
            "urlY=3",
            "Query: java AND programming",
            "urlY=4",
            "Query: java OR programming",
            "urlZ=1",
            "urlX=2",
            "urlY=4",
            "Query: java MINUS programming",
            "urlX=2",
        ]
    
    def test_no_matches(self, dict_index):
        out = io.StringIO()
        
        demo.run_demo("cobol", "fortran", dict_index, out=out)
        
        assert out.getvalue().splitlines() == [
            "Query: cobol",
            "Query: fortran",
            "Query: cobol AND fortran",
            "Query: cobol OR fortran",
            "Query: cobol MINUS fortran",
        ]


class TestMain:
    """Test command line handling"""
    
    def test_usage_without_terms(self, capsys):
        assert demo.main(["java"]) == 1
        assert "Usage" in capsys.readouterr().err
    
    def test_missing_docs_path(self, isolated_logging, monkeypatch):
        monkeypatch.setenv("WIKISEARCH_DOCS_PATH", str(isolated_logging / "missing"))
        
        assert demo.main(["java", "programming"]) == 1
    
    def test_undecodable_document_is_skipped(self, isolated_logging, monkeypatch, capsys):
        docs = isolated_logging / "docs"
        docs.mkdir()
        (docs / "ok.txt").write_text("Java programming", encoding="utf-8")
        (docs / "bad.txt").write_bytes(b"java \xff\xfe latin")
        monkeypatch.setenv("WIKISEARCH_DOCS_PATH", str(docs))
        
        assert demo.main(["java", "programming"]) == 0
        
        lines = capsys.readouterr().out.splitlines()
        and_at = lines.index("Query: java AND programming")
        assert lines[and_at + 1] == "ok.txt=2"
    
    def test_searches_directory(self, isolated_logging, monkeypatch, capsys):
        docs = isolated_logging / "docs"
        docs.mkdir()
        (docs / "Java.txt").write_text("Java programming. Java.", encoding="utf-8")
        (docs / "Island.txt").write_text("Java island", encoding="utf-8")
        monkeypatch.setenv("WIKISEARCH_DOCS_PATH", str(docs))
        
        assert demo.main(["java", "programming"]) == 0
        
        lines = capsys.readouterr().out.splitlines()
        and_at = lines.index("Query: java AND programming")
        assert lines[and_at + 1] == "Java.txt=3"
        minus_at = lines.index("Query: java MINUS programming")
        assert lines[minus_at + 1:] == ["Island.txt=1"]


class TestLoadEnvironment:
    """Test .env discovery"""
    
    def test_prefers_env_local(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("WIKISEARCH_TEST_VAR=plain\n")
        (tmp_path / ".env.local").write_text("WIKISEARCH_TEST_VAR=local\n")
        monkeypatch.setenv("WIKISEARCH_TEST_VAR", "system")
        
        loaded = demo.load_environment(tmp_path)
        
        assert loaded == tmp_path / ".env.local"
        assert os.environ["WIKISEARCH_TEST_VAR"] == "local"
    
    def test_no_env_files(self, tmp_path):
        assert demo.load_environment(tmp_path) is None
