"""Shared fixtures: mdBook payloads and book checkouts."""

import pytest


def chapter_item(name, content, path, sub_items=None, number=None):
    """Build a chapter in mdBook's JSON form."""
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": number,
            "sub_items": sub_items or [],
            "path": path,
            "source_path": path,
            "parent_names": [],
        }
    }


@pytest.fixture
def context_data():
    """Preprocessor context as mdBook sends it."""
    return {
        "root": "/nonexistent/book",
        "config": {
            "book": {"authors": ["Ada"], "language": "en", "src": "src", "title": "Example"},
            "preprocessor": {"indexer": {"command": "mdbook-indexer"}},
        },
        "renderer": "html",
        "mdbook_version": "0.4.40",
        "__non_exhaustive": None,
    }


@pytest.fixture
def book_data():
    """A small book: two chapters, a nested chapter, a part title and a separator."""
    return {
        "sections": [
            chapter_item(
                "Chapter 1",
                "See #alpha and @bob, also #alpha again.",
                "chapter1.md",
                number=[1],
            ),
            {"PartTitle": "Part Two"},
            chapter_item(
                "Chapter 2",
                "# Chapter 2\n\n#beta is new. Ask @carol about #alpha.",
                "chapter2.md",
                number=[2],
                sub_items=[
                    chapter_item(
                        "Section 2.1",
                        "Nested #beta.",
                        "chapter2/section.md",
                        number=[2, 1],
                    ),
                ],
            ),
            "Separator",
        ],
        "__non_exhaustive": None,
    }


@pytest.fixture
def book_checkout(tmp_path):
    """A book checkout on disk with chapters under src/."""
    src = tmp_path / "src"
    (src / "guide").mkdir(parents=True)
    (src / "SUMMARY.md").write_text("# Summary\n\n- [Chapter 1](chapter1.md)\n")
    (src / "chapter1.md").write_text("See #alpha and @bob, also #alpha again.")
    (src / "guide" / "setup.md").write_text("Setup for #alpha by @carol.")
    (src / "plain.md").write_text("No markers here.")
    (tmp_path / "book.toml").write_text("[book]\ntitle = \"Example\"\n")
    return tmp_path
