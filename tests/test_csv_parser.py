"""Tests for the delimited-text parser used by CSV imports."""

from reelboard.csv_import.parser import parse_headers, parse_rows, split_line


class TestSplitLine:
    """Tests for split_line()."""

    def test_splits_and_trims(self):
        assert split_line("a, b ,c") == ["a", "b", "c"]

    def test_quoted_comma_stays_in_cell(self):
        assert split_line('"Hello, world",12') == ["Hello, world", "12"]

    def test_quotes_are_never_emitted(self):
        # A doubled quote toggles twice rather than producing a literal quote
        assert split_line('"say ""hi""",1') == ["say hi", "1"]

    def test_empty_cells(self):
        assert split_line("a,,c,") == ["a", "", "c", ""]

    def test_single_cell(self):
        assert split_line("only") == ["only"]


class TestParseRows:
    """Tests for parse_rows()."""

    def test_rows_keyed_by_header(self):
        rows = parse_rows("Title,Views\nGarden tour,120\nKitchen,45")

        assert rows == [
            {"Title": "Garden tour", "Views": "120"},
            {"Title": "Kitchen", "Views": "45"},
        ]

    def test_crlf_line_endings(self):
        rows = parse_rows("Title,Views\r\nGarden tour,120\r\n")

        assert rows == [{"Title": "Garden tour", "Views": "120"}]

    def test_header_only_returns_empty(self):
        assert parse_rows("Title,Views") == []

    def test_empty_text_returns_empty(self):
        assert parse_rows("") == []
        assert parse_rows("   \n  ") == []

    def test_blank_lines_skipped(self):
        rows = parse_rows("Title,Views\nA,1\n   \n\nB,2")

        assert [r["Title"] for r in rows] == ["A", "B"]

    def test_short_row_padded(self):
        rows = parse_rows("Title,Views,Likes\nA,1")

        assert rows == [{"Title": "A", "Views": "1", "Likes": ""}]

    def test_extra_cells_dropped(self):
        rows = parse_rows("Title,Views\nA,1,extra,more")

        assert rows == [{"Title": "A", "Views": "1"}]

    def test_surrounding_whitespace_ignored(self):
        rows = parse_rows("\n\nTitle,Views\nA,1\n\n")

        assert rows == [{"Title": "A", "Views": "1"}]

    def test_quoted_title_with_comma(self):
        rows = parse_rows('Title,Views\n"Tips, tricks and more",1,200')

        assert rows[0]["Title"] == "Tips, tricks and more"
        assert rows[0]["Views"] == "1"


class TestParseHeaders:
    """Tests for parse_headers()."""

    def test_returns_header_cells(self):
        assert parse_headers("Video Title, Video Views\n1,2") == ["Video Title", "Video Views"]

    def test_header_only_input(self):
        assert parse_headers("Title,Views") == ["Title", "Views"]

    def test_empty_input(self):
        assert parse_headers("") == []
