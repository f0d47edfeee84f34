"""Unit tests for mdBook models and tool input validation."""

import pytest
from pydantic import ValidationError

from mdbook_indexer.constants import RewriteMode
from mdbook_indexer.models import (
    Book,
    BuildIndexInput,
    Chapter,
    PartTitle,
    PreprocessorContext,
    Separator,
    SupportsRendererInput,
)


class TestBook:
    """Tests for parsing and serializing mdBook's book JSON."""

    def test_parse_items(self, book_data):
        """Test chapters, part titles and separators are recognized."""
        book = Book.model_validate(book_data)

        assert [type(item) for item in book.sections] == [Chapter, PartTitle, Chapter, Separator]
        assert book.sections[1].title == "Part Two"
        assert book.sections[2].sub_items[0].path == "chapter2/section.md"
        assert book.sections[2].sub_items[0].number == [2, 1]

    def test_round_trip(self, book_data):
        """Test the JSON written back matches what mdBook sent."""
        book = Book.model_validate(book_data)

        assert book.to_json_data() == book_data

    def test_unknown_chapter_keys_preserved(self, book_data):
        """Test keys from newer mdBook versions survive a round trip."""
        book_data["sections"][0]["Chapter"]["future_field"] = {"x": 1}

        data = Book.model_validate(book_data).to_json_data()

        assert data["sections"][0]["Chapter"]["future_field"] == {"x": 1}

    def test_iter_chapters_sub_chapters_first(self, book_data):
        """Test sub-chapters are visited before their parent."""
        book = Book.model_validate(book_data)

        assert [c.path for c in book.iter_chapters()] == [
            "chapter1.md",
            "chapter2/section.md",
            "chapter2.md",
        ]

    def test_empty_book(self):
        book = Book.model_validate({"sections": [], "__non_exhaustive": None})

        assert list(book.iter_chapters()) == []
        assert book.to_json_data() == {"sections": [], "__non_exhaustive": None}

    def test_unrecognized_item(self):
        """Test unknown item shapes are rejected."""
        with pytest.raises(ValidationError):
            Book.model_validate({"sections": [{"Appendix": {}}]})

    def test_null_sub_items(self):
        chapter = Chapter.model_validate({"name": "x", "sub_items": None})

        assert chapter.sub_items == []


class TestChapter:
    """Tests for Chapter helpers."""

    def test_new(self):
        chapter = Chapter.new("Tags", "# Tags\n\n", "tags.md")

        assert chapter.name == "Tags"
        assert chapter.path == "tags.md"
        assert chapter.source_path == "tags.md"
        assert chapter.sub_items == []
        assert chapter.number is None

    def test_draft_chapter_identifier(self):
        """Test chapters without a path are identified by an empty string."""
        assert Chapter(name="Draft").identifier == ""
        assert Chapter(name="Done", path="done.md").identifier == "done.md"


class TestPreprocessorContext:
    """Tests for the preprocessor context."""

    def test_preprocessor_table(self, context_data):
        ctx = PreprocessorContext.model_validate(context_data)

        assert ctx.preprocessor_table("indexer") == {"command": "mdbook-indexer"}
        assert ctx.preprocessor_table("other") == {}
        assert ctx.renderer == "html"

    def test_missing_config(self):
        assert PreprocessorContext().preprocessor_table("indexer") == {}


class TestBuildIndexInput:
    """Tests for tool input validation."""

    def test_valid(self, tmp_path):
        params = BuildIndexInput(project_path=str(tmp_path), rewrite_mode="substring")

        assert params.docs_path == "src"
        assert params.write is False
        assert params.rewrite_mode is RewriteMode.SUBSTRING

    def test_rewrite_mode_case_insensitive(self, tmp_path):
        """Test mode names are normalized like the config file's."""
        params = BuildIndexInput(project_path=str(tmp_path), rewrite_mode=" Substring ")

        assert params.rewrite_mode is RewriteMode.SUBSTRING

    def test_blank_rewrite_mode_means_unset(self, tmp_path):
        assert BuildIndexInput(project_path=str(tmp_path), rewrite_mode="").rewrite_mode is None

    def test_relative_project_path(self):
        with pytest.raises(ValidationError) as exc_info:
            BuildIndexInput(project_path="relative/book")
        assert "absolute" in str(exc_info.value)

    def test_missing_project_path(self, tmp_path):
        with pytest.raises(ValidationError) as exc_info:
            BuildIndexInput(project_path=str(tmp_path / "missing"))
        assert "does not exist" in str(exc_info.value)

    def test_docs_path_traversal(self, tmp_path):
        with pytest.raises(ValidationError) as exc_info:
            BuildIndexInput(project_path=str(tmp_path), docs_path="../elsewhere")
        assert "traversal" in str(exc_info.value)

    def test_extra_fields_forbidden(self, tmp_path):
        with pytest.raises(ValidationError):
            BuildIndexInput(project_path=str(tmp_path), dry_run=True)

    def test_renderer_required(self):
        with pytest.raises(ValidationError):
            SupportsRendererInput(renderer="")
