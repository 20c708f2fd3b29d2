from application.services.literal_extractor import extract_multiline, extract_quoted
from domain.script import split_script


class TestExtractQuoted:
    def test_single_quotes(self):
        assert extract_quoted("* url 'http://api.test'") == "http://api.test"

    def test_double_quotes(self):
        assert extract_quoted('* path "/widgets"') == "/widgets"

    def test_single_quote_wins_and_spans_to_last(self):
        assert extract_quoted("* path '/a' + '/b'") == "/a' + '/b"

    def test_no_pair(self):
        assert extract_quoted("* url base") == ""
        assert extract_quoted("* url 'open") == ""


class TestExtractMultiline:
    def test_collects_until_closing_marker(self):
        lines = split_script('* def b = """\n  {\n    "a": 1\n  }\n"""\n* url \'x\'')
        value, closing = extract_multiline(lines, 0)
        assert value == '{\n"a": 1\n}'
        assert closing == 4

    def test_unterminated_runs_to_end(self):
        lines = split_script("'''\nfirst\nsecond")
        value, closing = extract_multiline(lines, 0)
        assert value == "first\nsecond"
        assert closing == 2
