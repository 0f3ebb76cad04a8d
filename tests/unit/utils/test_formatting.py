"""Unit tests for console formatting helpers."""

from listhub.models.category import Category
from listhub.utils.formatting import create_category_table, format_category_row


class TestCategoryTable:
    """Tests for category table helpers."""

    def test_table_columns(self) -> None:
        """The category table has the expected columns."""
        table = create_category_table("Demo")

        assert table.title == "Demo"
        assert [c.header for c in table.columns] == ["ID", "Category", "Path", "Entries", "Order"]

    def test_row_indented_by_depth(self) -> None:
        """Nested categories are indented and use the nested style."""
        category = Category(id=2, title="CLI", path="tools/cli", parent=1, count={"all": 4})

        row = format_category_row(category)

        assert row == ("2", "  [category_nested]CLI[/]", "tools/cli", "4", "20")

    def test_title_escaped(self) -> None:
        """Markup in titles is escaped."""
        category = Category(id=1, title="[bold]Tools", path="bold-tools")

        assert "\\[bold]Tools" in format_category_row(category)[1]
