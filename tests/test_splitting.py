"""Unit tests for splitting raw ingredient text."""

from mealplanner.ingredients import parse_ingredient_text, split_ingredient_text


class TestSplitIngredientText:
    """Tests for split_ingredient_text."""

    def test_all_separators(self, csv_ingredients_cell):
        """Test comma, semicolon, pipe and newline separators."""
        assert split_ingredient_text(csv_ingredients_cell) == [
            "2 cups Basmati Rice",
            "1 tsp salt",
            "3 cloves garlic",
            "4 Onions",
        ]

    def test_blank_input(self):
        """Test blank and missing text."""
        assert split_ingredient_text("") == []
        assert split_ingredient_text("   \n ") == []
        assert split_ingredient_text(None) == []

    def test_single_line(self):
        """Test text without separators."""
        assert split_ingredient_text("  Salt - to taste ") == ["Salt - to taste"]


class TestParseIngredientText:
    """Tests for parse_ingredient_text."""

    def test_split_and_parse(self, csv_ingredients_cell):
        """Test each split line is parsed in order."""
        results = parse_ingredient_text(csv_ingredients_cell)

        assert [r.unit for r in results] == ["cups", "tsp", "cloves", None]
        assert [r.name for r in results] == ["Basmati Rice", "salt", "garlic", "Onions"]

    def test_blank_text(self):
        """Test blank text gives no ingredients."""
        assert parse_ingredient_text("") == []
