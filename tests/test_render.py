"""Unit tests for the HTML, text and range renderers."""

from pocketdump.pocketdump import (
    Options,
    convert,
    format_unixdate,
    render_html,
    render_range,
    render_text,
)


def record(stamp, title, url):
    return {
        'uid': str(stamp),
        'status': "0",
        'url': url,
        'title': title,
        'timestamp': stamp,
    }


class TestFormatUnixdate:

    def test_epoch(self, utc):
        assert format_unixdate(0, utc) == "Thu Jan  1 00:00:00 UTC 1970"

    def test_two_digit_day(self, utc):
        assert format_unixdate(1510000000, utc) == (
            "Mon Nov  6 20:26:40 UTC 2017")
        assert format_unixdate(1510000000 + 10 * 86400, utc) == (
            "Thu Nov 16 20:26:40 UTC 2017")


class TestRenderHtml:
    """Test the HTML listing."""

    def test_document_shell(self, utc):
        output = render_html([], Options(title="My <Links>"), utc)
        assert output.startswith("<!DOCTYPE html><html>\n")
        assert '<meta charset="utf-8">' in output
        assert "<title>My &lt;Links&gt;</title>" in output
        assert "<ol>\n</ol>" in output
        assert output.rstrip().endswith("</body></html>")

    def test_entry(self, utc):
        output = render_html([record(100, "A", "http://a")], Options(), utc)
        assert (
            '<li>Thu Jan  1 00:01:40 UTC 1970 <a href="http://a">A</a></li>'
            in output)

    def test_title_is_escaped(self, utc):
        output = render_html(
            [record(100, '<b>Tom & "Jerry"</b>', "http://a")],
            Options(),
            utc)
        assert ">&lt;b&gt;Tom &amp; &quot;Jerry&quot;&lt;/b&gt;</a>" in output

    def test_url_is_verbatim(self, utc):
        url = 'http://a/?x=1&y="2"'
        output = render_html([record(100, "A", url)], Options(), utc)
        assert f'href="{url}"' in output

    def test_url_escaping_option(self, utc):
        url = 'http://a/?x=1&y="2"'
        output = render_html(
            [record(100, "A", url)], Options(escape_urls=True), utc)
        assert 'href="http://a/?x=1&amp;y=&quot;2&quot;"' in output

    def test_keeps_given_order(self, utc):
        records = [
            record(300, "C", "http://c"),
            record(100, "A", "http://a"),
        ]
        output = render_html(records, Options(), utc)
        assert output.index(">C</a>") < output.index(">A</a>")


class TestRenderText:
    """Test the plain text listing."""

    def test_numbered_entries(self, utc):
        records = [
            record(100, "A", "http://a"),
            record(200, "http://b", "http://b"),
        ]
        lines = render_text(records, Options(title="Dump"), utc).splitlines()
        assert lines[0] == "Dump"
        assert lines[1] == ""
        assert lines[2] == "1. Thu Jan  1 00:01:40 UTC 1970 A <http://a>"
        assert lines[3] == (
            "2. Thu Jan  1 00:03:20 UTC 1970 http://b <http://b>")

    def test_no_markup_or_escape_codes(self, utc):
        records = [record(100, "[bold]x[/bold] & <y>", "http://a")]
        output = render_text(records, Options(), utc)
        assert "[bold]x[/bold] & <y>" in output
        assert "\x1b" not in output

    def test_long_lines_are_not_wrapped(self, utc):
        title = "word " * 60
        output = render_text(
            [record(100, title.strip(), "http://a")], Options(), utc)
        assert len(output.splitlines()) == 3


class TestRenderRange:
    """Test the range summary."""

    def test_html(self, utc):
        records = [
            record(300, "C", "http://c"),
            record(100, "A", "http://a"),
        ]
        output = render_range(records, Options(), utc)
        assert ("<h1>1970-01-01 00:01:40 +0000 UTC - "
                "1970-01-01 00:05:00 +0000 UTC</h1>") in output
        assert "<ol>" not in output

    def test_text(self, utc):
        records = [record(100, "A", "http://a")]
        output = render_range(records, Options(output_format='text'), utc)
        assert output == (
            "1970-01-01 00:01:40 +0000 UTC - 1970-01-01 00:01:40 +0000 UTC\n")

    def test_empty(self, utc):
        output = render_range([], Options(output_format='text'), utc)
        assert output == "No bookmarks\n"

    def test_covers_whole_dump(self, make_dump, make_item, utc):
        """Filters don't narrow the summary."""
        text = make_dump(
            make_item("1", "100", "http://a", status="2"),
            make_item("2", "200", "http://b"),
            make_item("3", "300", "http://c"))
        options = Options(
            show_range=True, output_format='text', max_count=1)
        output = convert(text, options, ltz=utc)
        assert output.startswith("1970-01-01 00:01:40")
        assert "00:05:00" in output
