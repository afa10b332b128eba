"""Unit tests for the bulk table-of-contents parser."""

from book_composer.parsers import BulkTOCParser, parse_bulk_toc


class TestBulkTOCParser:
    """Tests for the field-count decision table."""

    def test_three_columns_tab_separated(self):
        items = parse_bulk_toc("Prayer\t12\tنماز")

        assert len(items) == 1
        assert items[0].type == "toc_entry"
        assert items[0].fields == {"urdu": "نماز", "english": "Prayer", "toc_page": "12"}

    def test_three_columns_space_separated(self):
        items = parse_bulk_toc("Fasting   30   روزہ")
        assert items[0].fields == {"urdu": "روزہ", "english": "Fasting", "toc_page": "30"}

    def test_two_columns_urdu_topic(self):
        items = parse_bulk_toc("نماز کا طریقہ\t12")
        assert items[0].fields == {"urdu": "نماز کا طریقہ", "english": "", "toc_page": "12"}

    def test_two_columns_english_topic(self):
        items = parse_bulk_toc("Method of prayer  7")
        assert items[0].fields == {"urdu": "", "english": "Method of prayer", "toc_page": "7"}

    def test_two_columns_non_numeric_page_goes_wholesale(self):
        items = parse_bulk_toc("Prayer\tintro")
        assert items[0].fields == {"urdu": "Prayer\tintro", "english": "", "toc_page": ""}

    def test_single_field_goes_wholesale(self):
        items = parse_bulk_toc("Introduction ")
        assert items[0].fields == {"urdu": "Introduction", "english": "", "toc_page": ""}

    def test_trailing_tab_counts_as_empty_field(self):
        items = parse_bulk_toc("Prayer\t")
        assert items[0].fields == {"urdu": "Prayer", "english": "", "toc_page": ""}

    def test_padding_counts_as_separator(self):
        items = parse_bulk_toc("  Introduction  ")
        assert items[0].fields == {"urdu": "", "english": "", "toc_page": "Introduction"}

    def test_page_number_must_be_ascii_digits(self):
        items = parse_bulk_toc("Prayer\t١٢")
        assert items[0].fields == {"urdu": "Prayer\t١٢", "english": "", "toc_page": ""}

    def test_blank_lines_are_skipped(self):
        items = parse_bulk_toc("A\t1\n\n   \nB\t2\n")
        assert [i.get("english") for i in items] == ["A", "B"]

    def test_every_entry_has_fresh_id(self):
        items = parse_bulk_toc("A\t1\nB\t2\nC\t3")
        ids = [i.id for i in items]
        assert len(set(ids)) == 3
        assert all(i.startswith("toc-") for i in ids)

    def test_empty_text(self):
        assert parse_bulk_toc("") == []

    def test_strategy_for(self):
        parser = BulkTOCParser()
        assert parser.strategy_for(5) == "three_columns"
        assert parser.strategy_for(2) == "two_columns"
        assert parser.strategy_for(1) == "wholesale"

    def test_morning_duas(self):
        english = parse_bulk_toc("Morning Duas\t12")[0]
        urdu = parse_bulk_toc("صبح کی دعائیں\t12")[0]

        assert english.fields == {"urdu": "", "english": "Morning Duas", "toc_page": "12"}
        assert urdu.fields == {"urdu": "صبح کی دعائیں", "english": "", "toc_page": "12"}
