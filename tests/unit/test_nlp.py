"""Unit tests for NLP utilities."""

import sys

import pytest

from desumasu.utils import nlp


class TestGetNlp:
    """Test lazy pipeline loading."""

    def test_missing_spacy(self, monkeypatch):
        """Test a clear error when spaCy is not installed."""
        monkeypatch.setattr(nlp, "_nlp", {})
        monkeypatch.setitem(sys.modules, "spacy", None)
        with pytest.raises(RuntimeError, match="pip install spacy"):
            nlp.get_nlp("A")

    def test_pipeline_is_cached_per_mode(self, monkeypatch):
        """Test each split mode is loaded once."""
        pytest.importorskip("spacy")
        pytest.importorskip("sudachipy")
        monkeypatch.setattr(nlp, "_nlp", {})
        try:
            first = nlp.get_nlp("A")
        except RuntimeError as e:
            pytest.skip(str(e))
        assert nlp.get_nlp("A") is first
        assert list(nlp._nlp) == ["A"]
