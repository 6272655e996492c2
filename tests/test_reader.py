"""
Unit tests for the CSV reader.
"""
import pytest

from campaign_analyzer.reader import read_rows, split_fields, lookup, BODY_COLUMNS


class TestSplitFields:
    """Tests for the quote-aware comma splitter."""

    def test_plain_fields(self):
        """Test splitting an unquoted record."""
        assert split_fields("a, b ,c") == ["a", "b", "c"]

    def test_quoted_comma_does_not_split(self):
        """Test that commas inside quotes stay in the field."""
        assert split_fields('a,"b,c",d') == ["a", "b,c", "d"]

    def test_escaped_quotes_preserved(self):
        """Test that doubled quotes become literal quotes."""
        assert split_fields('"Hi, I said ""hello"""') == ['Hi, I said "hello"']

    def test_empty_quoted_field(self):
        """Test an empty quoted field."""
        assert split_fields('"",x') == ["", "x"]

    def test_trailing_empty_field(self):
        """Test a record ending in a comma."""
        assert split_fields("a,") == ["a", ""]


class TestReadRows:
    """Tests for turning CSV text into rows."""

    def test_headers_lower_cased_and_unquoted(self):
        """Test header normalisation."""
        rows = read_rows('"Subject","BODY"\nHello,This body is long enough')

        assert rows == [{"subject": "Hello", "body": "This body is long enough"}]

    def test_escaped_quote_round_trip(self):
        """Test a quoted field with embedded quotes and commas."""
        rows = read_rows('subject,body\n"Hi, I said ""hello""","A body that is long enough"')

        assert rows[0]["subject"] == 'Hi, I said "hello"'
        assert rows[0]["body"] == "A body that is long enough"

    def test_multiline_quoted_field(self):
        """Test that a newline inside quotes keeps the row together."""
        text = (
            "subject,body\n"
            '"Hello","Line one of body\n'
            'line two of body"\n'
            '"Second","Another body here"\n'
        )

        rows = read_rows(text)

        assert len(rows) == 2
        assert rows[0]["body"] == "Line one of body\nline two of body"
        assert rows[1]["subject"] == "Second"

    def test_blank_line_inside_quotes_kept(self):
        """Test a paragraph break inside a quoted body."""
        text = 'subject,body\nHi,"First paragraph\n\nSecond paragraph"'

        rows = read_rows(text)

        assert len(rows) == 1
        assert rows[0]["body"] == "First paragraph\n\nSecond paragraph"

    def test_unterminated_quote_closes_record(self):
        """Test that a missing closing quote does not lose the row."""
        rows = read_rows('subject,body\nHi,"Body that never ends')

        assert rows == [{"subject": "Hi", "body": "Body that never ends"}]

    def test_crlf_line_endings(self):
        """Test Windows line endings."""
        rows = read_rows("subject,body\r\nHi,Body that is long\r\n")

        assert rows == [{"subject": "Hi", "body": "Body that is long"}]

    def test_blank_lines_ignored(self):
        """Test that blank lines between records are skipped."""
        rows = read_rows("subject\n\nHi\n\n\nThere\n")

        assert [r["subject"] for r in rows] == ["Hi", "There"]

    def test_missing_values_default_to_empty(self):
        """Test a short row."""
        rows = read_rows("subject,body,opens\nHi")

        assert rows == [{"subject": "Hi", "body": "", "opens": ""}]

    def test_extra_values_ignored(self):
        """Test a row with more values than headers."""
        rows = read_rows("subject\nHi,extra,values")

        assert rows == [{"subject": "Hi"}]


class TestRowFiltering:
    """Tests for dropping empty and fragment rows."""

    def test_fully_empty_row_dropped(self):
        """Test that a row without body, subject or recipient is dropped."""
        rows = read_rows('subject,body,recipient\n,,\n"",  "",""')

        assert rows == []

    def test_short_body_dropped(self):
        """Test that a body under 10 characters is dropped."""
        rows = read_rows("body\nshort")

        assert rows == []

    def test_short_body_dropped_even_with_subject(self):
        """Test that a short body fragment drops the row."""
        rows = read_rows("subject,body\nHello,tiny")

        assert rows == []

    def test_subject_only_row_kept(self):
        """Test that a subject alone keeps the row."""
        rows = read_rows("subject,body,recipient\nHi,,")

        assert rows == [{"subject": "Hi", "body": "", "recipient": ""}]

    def test_recipient_only_row_kept(self):
        """Test that a recipient alone keeps the row."""
        rows = read_rows("to,opens\nann@example.com,1")

        assert len(rows) == 1

    def test_alias_columns_count(self):
        """Test that alias headers are used for the emptiness check."""
        rows = read_rows("Subject Line,Email Body\nHello,")

        assert rows == [{"subject line": "Hello", "email body": ""}]

    def test_body_of_exactly_ten_characters_kept(self):
        """Test the boundary of the body length rule."""
        rows = read_rows("body\n0123456789")

        assert len(rows) == 1


class TestMalformedInput:
    """Tests for input that has no data rows."""

    @pytest.mark.parametrize("text", ["", "   ", "subject,body", "subject,body\n\n\n", None])
    def test_returns_empty_list(self, text):
        """Test that header-only or empty input yields no rows."""
        assert read_rows(text) == []


class TestLookup:
    """Tests for alias lookup."""

    def test_first_non_empty_alias_wins(self):
        """Test alias order."""
        row = {"body": "", "email body": "From alias", "content": "Later alias"}

        assert lookup(row, BODY_COLUMNS) == "From alias"

    def test_default_when_missing(self):
        """Test the default value."""
        assert lookup({}, BODY_COLUMNS) == ""
        assert lookup({}, BODY_COLUMNS, "n/a") == "n/a"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
