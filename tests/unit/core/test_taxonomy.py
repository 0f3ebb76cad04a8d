"""Unit tests for the category taxonomy.

Tests for slug normalization and the CategoryTree builder.
"""

import pytest
from listhub.core.taxonomy import CategoryTree, slugify


class TestSlugify:
    """Tests for slugify function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Command Line", "command-line"),
            ("Café Tools", "cafe-tools"),
            ("C++ & Rust", "c-rust"),
            ("  Spaced   Out  ", "spaced-out"),
            ("already-slugged", "already-slugged"),
            ("snake_case", "snake_case"),
            ("--Edge--", "edge"),
            ("Straße", "strasse"),
            ("Łódź", "lodz"),
            ("Ærø", "aero"),
            ("Москва", "moskva"),
            ("!!!", ""),
        ],
    )
    def test_slugify(self, value: str, expected: str) -> None:
        """slugify produces ASCII lower-case hyphenated tokens."""
        assert slugify(value) == expected


class TestCategoryTreeInsert:
    """Tests for CategoryTree.insert()."""

    def test_creates_ancestors(self) -> None:
        """Inserting a nested label creates every level with parents."""
        tree = CategoryTree()

        ids = tree.insert("Tools/Command Line", {"all": 1})

        assert ids == [1, 2]
        tools = tree.get(1)
        cli = tree.get(2)
        assert tools is not None and cli is not None
        assert tools.path == "tools"
        assert tools.parent is None
        assert cli.path == "tools/command-line"
        assert cli.title == "Command Line"
        assert cli.parent == 1

    def test_existing_path_increments_counts(self) -> None:
        """Re-inserting a path increments counters and overwrites the title."""
        tree = CategoryTree()
        tree.insert("tools", {"all": 1, "link": 1})

        ids = tree.insert("Tools", {"all": 1, "github": 1})

        assert ids == [1]
        category = tree.get(1)
        assert category is not None
        assert category.title == "Tools"
        assert category.count == {"all": 2, "link": 1, "github": 1}

    def test_title_first_letter_uppercased(self) -> None:
        """Titles get their first letter upper-cased and are trimmed."""
        tree = CategoryTree()

        tree.insert(" web frameworks /apis")

        assert [c.title for c in tree] == ["Web frameworks", "Apis"]

    def test_empty_segments_skipped(self) -> None:
        """Empty and non-sluggable segments are skipped."""
        tree = CategoryTree()

        ids = tree.insert("/Tools//!!!/CLI/")

        assert ids == [1, 2]
        assert [c.path for c in tree] == ["tools", "tools/cli"]

    def test_non_latin_segments_kept(self) -> None:
        """Non-Latin titles are transliterated instead of dropped."""
        tree = CategoryTree()

        russian = tree.insert("Languages/Русский")
        greek = tree.insert("Languages/Ελληνικά")

        assert len(russian) == 2
        assert len(greek) == 2
        assert russian[0] == greek[0]
        assert russian[1] != greek[1]
        assert all(c.path.isascii() for c in tree)

    def test_ids_are_per_tree(self) -> None:
        """Each tree numbers its categories from 1."""
        first = CategoryTree()
        second = CategoryTree()
        first.insert("A/B")

        assert second.insert("C") == [1]

    def test_find_and_contains(self) -> None:
        """Categories can be looked up by path and id."""
        tree = CategoryTree()
        tree.insert("Docs")

        assert tree.find("docs") is tree.get(1)
        assert tree.find("missing") is None
        assert 1 in tree
        assert 2 not in tree
        assert len(tree) == 1


class TestCategoryTreeRelease:
    """Tests for CategoryTree.release()."""

    def test_decrements_counts(self) -> None:
        """Releasing decrements 'all' and the entry type counter."""
        tree = CategoryTree()
        tree.insert("Tools", {"all": 1, "link": 1})
        tree.insert("Tools", {"all": 1, "github": 1})

        removed = tree.release(1, "github")

        assert removed is False
        assert tree.get(1).count == {"all": 1, "link": 1, "github": 0}  # type: ignore[union-attr]

    def test_removes_empty_category(self) -> None:
        """A category whose 'all' counter drops below 1 is deleted."""
        tree = CategoryTree()
        tree.insert("Tools", {"all": 1, "link": 1})

        assert tree.release(1, "link") is True
        assert tree.find("tools") is None
        assert len(tree) == 0

    def test_unknown_category_ignored(self) -> None:
        """Releasing an unknown id is a no-op."""
        assert CategoryTree().release(42, "link") is False

    def test_removed_path_gets_new_id(self) -> None:
        """A path recreated after removal gets a fresh id."""
        tree = CategoryTree()
        tree.insert("Tools", {"all": 1})
        tree.release(1, "link")

        assert tree.insert("Tools", {"all": 1}) == [2]


class TestCategoryTreeOrder:
    """Tests for CategoryTree.apply_order()."""

    def test_apply_order(self) -> None:
        """Mapped paths get their priority, others the default."""
        tree = CategoryTree()
        tree.insert("Tools/CLI")
        tree.insert("Docs")

        tree.apply_order({"docs": 1, "tools/cli": 5, "unknown": 3})

        assert [(c.path, c.order) for c in tree] == [
            ("tools", 20),
            ("tools/cli", 5),
            ("docs", 1),
        ]
