"""Unit tests for index chapter rendering."""

from mdbook_indexer.indexing.renderer import render, render_section


class TestRender:
    """Tests for render()."""

    def test_single_entry(self):
        """Test heading levels and list syntax."""
        body = render("Tags", "#", {"x": ["a.md", "b.md"]})

        assert body == "# Tags\n\n## #x\n- [a.md](a.md)\n- [b.md](b.md)\n"

    def test_empty_table_renders_only_title(self):
        """Test that an empty index has no sections."""
        assert render("Tags", "#", {}) == "# Tags\n\n"
        assert render("Mentions", "@", {}) == "# Mentions\n\n"

    def test_duplicates_are_kept(self):
        """Test one line per stored identifier."""
        body = render("Tags", "#", {"alpha": ["chapter1.md", "chapter1.md"]})

        assert body.count("- [chapter1.md](chapter1.md)\n") == 2

    def test_every_entry_has_a_section(self):
        """Test multiple entries, in whatever order."""
        body = render("Mentions", "@", {"bob": ["a.md"], "carol": ["b.md", "c.md"]})

        assert body.startswith("# Mentions\n\n")
        assert "## @bob\n- [a.md](a.md)\n" in body
        assert "## @carol\n- [b.md](b.md)\n- [c.md](c.md)\n" in body

    def test_sorted_entries(self):
        """Test sort_entries orders sections by name."""
        table = {"zeta": ["z.md"], "alpha": ["a.md"]}

        body = render("Tags", "#", table, sort_entries=True)

        assert body == (
            "# Tags\n\n"
            "## #alpha\n- [a.md](a.md)\n"
            "## #zeta\n- [z.md](z.md)\n"
        )

    def test_nested_identifiers(self):
        """Test identifiers with directories are used as-is."""
        body = render("Tags", "#", {"x": ["guide/setup.md"]})

        assert "- [guide/setup.md](guide/setup.md)" in body


class TestRenderSection:
    """Tests for render_section()."""

    def test_section(self):
        assert render_section("@", "bob", ["a.md"]) == "## @bob\n- [a.md](a.md)\n"
