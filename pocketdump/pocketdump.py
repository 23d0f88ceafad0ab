#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""pocketdump
Version:  0.1.0
Author:   Sean O'Connell <sean@sdoconnell.net>
License:  MIT
Homepage: https://github.com/sdoconnell/pocketdump
About:
Converts a Pocket JSON export into an HTML or plain text bookmark listing.

usage: pocketdump [-h] [-c <file>] [-i <file>] [-o <file>] [-t <title>]
                  [-f {html,text}] [-r] [--range] [-s <time>] [-e <time>]
                  [--url-regex <regex>] [--title-regex <regex>] [-m <n>]
                  [--status {active,unread,none}] [--escape-urls] [-v]
                  [--version]

Convert a Pocket JSON dump into a bookmark listing.

optional arguments:
  -h, --help            show this help message and exit
  -c <file>, --config <file>
                        config file
  -i <file>, --in <file>
                        input file in JSON (default: stdin)
  -o <file>, --out <file>
                        output file (default: stdout)
  -t <title>, --title <title>
                        title of the output document
  -f {html,text}, --format {html,text}
                        output format (default: html)
  -r, --reverse         sort reverse-chronologically (most recent first)
  --range               print the range of dates in the dump and exit
  -s <time>, --start <time>
                        only bookmarks added at or after this time
  -e <time>, --end <time>
                        only bookmarks added at or before this time
  --url-regex <regex>   only bookmarks whose URL matches regex
  --title-regex <regex>
                        only bookmarks whose title matches regex
  -m <n>, --max <n>     maximum number of bookmarks printed, -1 for unlimited
  --status {active,unread,none}
                        which items to include (default: active)
  --escape-urls         HTML-escape URLs in links
  -v, --verbose         print debugging information
  --version             show version info

Times given to --start and --end use RFC 3339 with optional time and
time zone, defaulting to local time: 2017-11-01[T00[:00[:00]]][-07:00]

The optional config file ($XDG_CONFIG_HOME/pocketdump/config) holds a
[main] section with the keys title, format, reverse, max, status_filter
and escape_urls. Command line flags take precedence.


Copyright © 2021 Sean O'Connell

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

"""
import argparse
import configparser
import html
import io
import json
import logging
import os
import re
import sys
from collections import namedtuple
from datetime import datetime, timezone

import tzlocal
from dateutil import parser as dtparser
from rich.console import Console
from rich.text import Text

APP_NAME = "pocketdump"
APP_VERS = "0.1.0"
APP_COPYRIGHT = "Copyright © 2021 Sean O'Connell."
APP_LICENSE = "Released under MIT license."
DEFAULT_CONFIG_FILE = f"$HOME/.config/{APP_NAME}/config"
DEFAULT_TITLE = "Pocket Dump"

# item status codes as exported by Pocket
STATUS_UNREAD = "0"
STATUS_ARCHIVED = "1"
STATUS_DELETED = "2"

STATUS_FILTERS = ("active", "unread", "none")
OUTPUT_FORMATS = ("html", "text")
UNLIMITED = -1

# fields of a Pocket item and the JSON types they must hold
STRING_FIELDS = (
    "item_id", "resolved_id", "given_url", "given_title", "favorite",
    "status", "resolved_title", "resolved_url", "excerpt", "is_article",
    "has_video", "has_image", "word_count", "time_added", "time_read",
    "time_favorited", "lang", "is_index")
OBJECT_FIELDS = ("images", "videos", "domain_metadata")
INTEGER_FIELDS = ("sort_id", "listen_duration_estimate")

EPOCH_SLACK = 86400
RE_ZONE = re.compile(r".+([zZ]|[+\-]\d\d:\d\d)$")
RE_SECONDS = re.compile(r".+[tT]\d\d:\d\d:\d\d")
RE_MINUTES = re.compile(r".+[tT]\d\d:\d\d")
RE_HOURS = re.compile(r".+[tT]\d\d")
RE_EPOCH = re.compile(r"[+\-]?[0-9]+")

Options = namedtuple(
    'Options',
    [
        'in_file',
        'out_file',
        'title',
        'output_format',
        'reverse',
        'show_range',
        'start',
        'end',
        'url_regex',
        'title_regex',
        'max_count',
        'status_filter',
        'escape_urls',
    ],
    defaults=(
        '-',
        '-',
        DEFAULT_TITLE,
        'html',
        False,
        False,
        None,
        None,
        None,
        None,
        UNLIMITED,
        'active',
        False,
    ))

logger = logging.getLogger(APP_NAME)


class PocketDumpError(Exception):
    """Base class for errors that abort a conversion."""


class ConfigurationError(PocketDumpError):
    """Invalid options, rejected before any input is read."""


class InputIOError(PocketDumpError):
    """The input can't be read or the output can't be written."""


class MalformedInputError(PocketDumpError):
    """The dump isn't a well-formed Pocket export.

    Attributes:
        kind (str):     one of 'syntax', 'truncated', 'type' or 'empty'.
        offset (int):   character position of the problem, if known.
        field (str):    name of the field holding a wrong-typed value.

    """
    def __init__(self, kind, message, offset=None, field=None):
        super().__init__(message)
        self.kind = kind
        self.offset = offset
        self.field = field


class InvalidTimestamp(PocketDumpError):
    """A stored or user-supplied time that can't be parsed."""
    def __init__(self, value, reason=None):
        msg = f"invalid timestamp {value!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.value = value


def make_time(timestr, ltz=None):
    """Parse a partial RFC 3339 string into an aware datetime.

    A string carrying a UTC marker or offset must be a complete date-time.
    Anything else is read as local time, with missing seconds, minutes
    and hours filled in with zeros.

    Args:
        timestr (str):  e.g., '2017-11-01', '2017-11-01T09',
    '2017-11-01T09:30:00-07:00'.
        ltz (tzinfo):   the zone for strings without an offset
    (default is the local zone).

    Returns:
        timeobj (datetime): the parsed instant.

    """
    if not isinstance(timestr, str):
        raise InvalidTimestamp(timestr)
    if RE_ZONE.match(timestr):
        if not RE_SECONDS.match(timestr):
            raise InvalidTimestamp(
                timestr, "a time zone needs a complete date-time")
        try:
            return dtparser.isoparse(timestr)
        except (ValueError, OverflowError) as err:
            raise InvalidTimestamp(timestr, err) from err

    if RE_SECONDS.match(timestr):
        fullstr = timestr
    elif RE_MINUTES.match(timestr):
        fullstr = f"{timestr}:00"
    elif RE_HOURS.match(timestr):
        fullstr = f"{timestr}:00:00"
    else:
        fullstr = f"{timestr}T00:00:00"

    try:
        timeobj = dtparser.isoparse(fullstr)
    except (ValueError, OverflowError) as err:
        raise InvalidTimestamp(timestr, err) from err
    if ltz is None:
        ltz = tzlocal.get_localzone()
    return timeobj.replace(tzinfo=ltz)


def parse_epoch(raw):
    """Parse a decimal epoch-seconds string.

    The value must be displayable as a date in any zone, so a day of
    slack is required on both sides of the supported years.

    """
    if not isinstance(raw, str) or not RE_EPOCH.fullmatch(raw):
        raise InvalidTimestamp(raw)
    stamp = int(raw)
    try:
        datetime.fromtimestamp(stamp - EPOCH_SLACK, tz=timezone.utc)
        datetime.fromtimestamp(stamp + EPOCH_SLACK, tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as err:
        raise InvalidTimestamp(raw, err) from err
    return stamp


def _value_offset(text, *keys):
    """Find the position of the value stored under a chain of keys.

    The search is textual: each key is looked for as an object key
    after the position of the previous one.

    """
    pos = 0
    for key in keys:
        pattern = re.compile(
            re.escape(json.dumps(key, ensure_ascii=False)) + r"\s*:\s*")
        match = pattern.search(text, pos)
        if not match:
            return None
        pos = match.end()
    return pos


def _type_error(text, field, *keys):
    offset = _value_offset(text, *keys) if keys else 0
    if offset is None:
        where = ""
    else:
        where = f" at position {offset}"
    return MalformedInputError(
        'type',
        f"JSON contains an invalid value for the {field!r} field{where}",
        offset=offset,
        field=field)


def _check_item(text, path, item):
    """Verify each known field of a Pocket item holds the right type.

    Args:
        text (str):     the raw JSON document, to locate errors.
        path (tuple):   the keys leading to the item.
        item (dict):    the decoded item.

    """
    if not isinstance(item, dict):
        raise _type_error(text, path[-1], *path)
    for field in STRING_FIELDS:
        value = item.get(field)
        if value is not None and not isinstance(value, str):
            raise _type_error(text, field, *path, field)
    for field in OBJECT_FIELDS:
        value = item.get(field)
        if value is not None and not isinstance(value, (dict, list)):
            raise _type_error(text, field, *path, field)
    for field in INTEGER_FIELDS:
        value = item.get(field)
        if value is not None and (
                isinstance(value, bool) or not isinstance(value, int)):
            raise _type_error(text, field, *path, field)


def load_dump(text):
    """Decode a Pocket dump and return its items.

    Accepts either a full 'retrieve' response with the items under
    'list', or a bare mapping of item id to item.

    Args:
        text (str): the raw JSON document.

    Returns:
        items (dict):   item id mapped to the raw item data.

    """
    if not text.strip():
        raise MalformedInputError('empty', "JSON file cannot be empty")
    try:
        dump = json.loads(text)
    except json.JSONDecodeError as err:
        # an error at the very end of the data means it was cut short
        if (err.pos >= len(text.rstrip())
                or err.msg.startswith("Unterminated string")):
            raise MalformedInputError(
                'truncated',
                "Badly-formed JSON: Unexpected EOF",
                offset=err.pos) from err
        raise MalformedInputError(
            'syntax',
            f"Badly-formed JSON: Error at position {err.pos}",
            offset=err.pos) from err

    if not isinstance(dump, dict):
        raise _type_error(text, "(root)")
    if "list" in dump:
        items = dump["list"]
        # Pocket sends an empty list instead of an empty object
        if items == []:
            items = {}
        elif not isinstance(items, dict):
            raise _type_error(text, "list", "list")
        keys = ("list",)
    else:
        items = dump
        keys = ()

    for uid, item in items.items():
        _check_item(text, keys + (uid,), item)
    logger.debug("decoded %d items", len(items))
    return items


def display_title(item, uid=""):
    """Pick the title shown for an item: given, then resolved, then URL."""
    return (item.get('given_title')
            or item.get('resolved_title')
            or item.get('given_url')
            or uid)


def parse_items(items):
    """Normalize raw Pocket items into bookmark records.

    Items sharing a timestamp are all kept.

    Args:
        items (dict):   item id mapped to the raw item data.

    Returns:
        records (list): one dict per item with the keys 'uid', 'status',
    'url', 'title' and 'timestamp'.

    """
    records = []
    for uid, item in items.items():
        record = {}
        record['uid'] = uid
        record['status'] = item.get('status') or ""
        record['url'] = item.get('given_url') or ""
        record['title'] = display_title(item, uid)
        record['timestamp'] = parse_epoch(item.get('time_added'))
        records.append(record)
    return records


def compile_pattern(pattern, name):
    """Compile an optional regex, or return None for an empty one."""
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as err:
        raise ConfigurationError(
            f"invalid {name} regex {pattern!r}: {err}") from err


def validate_options(options, now=None):
    """Reject nonsensical options before anything is read.

    Args:
        options (Options):  the conversion options.
        now (datetime):     the default end of the time window.

    """
    if options.max_count == 0 or options.max_count < UNLIMITED:
        raise ConfigurationError(
            f"maximum is nonsensical: {options.max_count}")
    if options.output_format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"unknown output format: {options.output_format}")
    if options.status_filter not in STATUS_FILTERS:
        raise ConfigurationError(
            f"unknown status filter: {options.status_filter}")
    end = options.end or now or datetime.now(tz=timezone.utc)
    if options.start and end < options.start:
        raise ConfigurationError("range is nonsensical")


def _status_selected(record, status_filter):
    if status_filter == 'active':
        return record['status'] != STATUS_DELETED
    if status_filter == 'unread':
        return record['status'] == STATUS_UNREAD
    return True


def select_items(records, options, now=None):
    """Return the records that pass every configured filter.

    The time window is inclusive at both ends. A missing start falls
    back to the earliest record, a missing end to `now`.

    Args:
        records (list):     normalized records.
        options (Options):  the conversion options.
        now (datetime):     the current time (default is the clock).

    Returns:
        selected (list):    the surviving records, in input order.

    """
    if not records:
        return []
    if options.start:
        start = options.start.timestamp()
    else:
        start = min(record['timestamp'] for record in records)
    end = options.end or now or datetime.now(tz=timezone.utc)
    end = end.timestamp()

    selected = []
    for record in records:
        if not _status_selected(record, options.status_filter):
            continue
        if record['timestamp'] < start or record['timestamp'] > end:
            continue
        if options.url_regex and not options.url_regex.search(
                record['url']):
            continue
        if options.title_regex and not options.title_regex.search(
                record['title']):
            continue
        selected.append(record)
    logger.debug("selected %d of %d records", len(selected), len(records))
    return selected


def order_items(records, reverse=False, max_count=UNLIMITED):
    """Sort records by timestamp and keep at most `max_count` of them."""
    ordered = sorted(
        records, key=lambda record: record['timestamp'], reverse=reverse)
    if max_count != UNLIMITED:
        ordered = ordered[:max_count]
    return ordered


def format_unixdate(stamp, ltz):
    """Format epoch seconds like date(1): 'Mon Jan  2 15:04:05 MST 2006'."""
    timeobj = datetime.fromtimestamp(stamp, tz=ltz)
    return (f"{timeobj:%a %b} {timeobj.day:2d} "
            f"{timeobj:%H:%M:%S} {timeobj.tzname()} {timeobj.year}")


def _format_range_time(stamp, ltz):
    timeobj = datetime.fromtimestamp(stamp, tz=ltz)
    return timeobj.strftime("%Y-%m-%d %H:%M:%S %z %Z")


def _html_head(title):
    return ('<!DOCTYPE html><html>\n<head><meta charset="utf-8">'
            f'<title>{html.escape(title)}</title></head><body>\n')


def render_html(records, options, ltz):
    """Render records as an ordered list of links in an HTML page.

    Titles are escaped. URLs are written verbatim unless
    `options.escape_urls` is set.

    """
    lines = [_html_head(options.title), "<ol>\n"]
    for record in records:
        when = format_unixdate(record['timestamp'], ltz)
        url = record['url']
        if options.escape_urls:
            url = html.escape(url)
        lines.append(
            f'<li>{when} <a href="{url}">'
            f'{html.escape(record["title"])}</a></li>\n')
    lines.append("</ol>\n</body></html>\n")
    return "".join(lines)


def render_text(records, options, ltz):
    """Render records as a numbered plain text list."""
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        color_system=None,
        soft_wrap=True,
        markup=False,
        emoji=False,
        highlight=False)
    console.print(options.title)
    console.print("")
    for index, record in enumerate(records, start=1):
        when = format_unixdate(record['timestamp'], ltz)
        titletxt = Text(record['title'])
        titletxt.stylize("bold")
        console.print(
            Text.assemble(
                f"{index}. {when} ", titletxt, f" <{record['url']}>"))
    return buffer.getvalue()


def render_range(records, options, ltz):
    """Report the earliest and latest timestamp in the whole dump."""
    if records:
        stamps = [record['timestamp'] for record in records]
        summary = (f"{_format_range_time(min(stamps), ltz)} - "
                   f"{_format_range_time(max(stamps), ltz)}")
    else:
        summary = "No bookmarks"
    if options.output_format == 'text':
        return f"{summary}\n"
    return (f"{_html_head(options.title)}"
            f"<h1>{html.escape(summary)}</h1>\n</body></html>\n")


def convert(text, options, ltz=None, now=None):
    """Run the whole pipeline over a dump and return the rendered output.

    Args:
        text (str):         the raw JSON dump.
        options (Options):  the conversion options.
        ltz (tzinfo):       zone used to display times (default local).
        now (datetime):     the current time (default is the clock).

    Returns:
        output (str):   the rendered document.

    """
    validate_options(options, now=now)
    if ltz is None:
        ltz = tzlocal.get_localzone()
    records = parse_items(load_dump(text))
    if options.show_range:
        return render_range(records, options, ltz)

    selected = select_items(records, options, now=now)
    ordered = order_items(
        selected,
        reverse=options.reverse,
        max_count=options.max_count)
    if options.output_format == 'text':
        return render_text(ordered, options, ltz)
    return render_html(ordered, options, ltz)


class PocketDump():
    """Performs Pocket dump conversions.

    Attributes:
        config_file (str):      application config file.
        require_config (bool):  fail if the config file is missing.

    """
    def __init__(
            self,
            config_file,
            require_config=False):
        """Initializes a PocketDump() object."""
        self.config_file = config_file
        self.require_config = require_config
        self.ltz = tzlocal.get_localzone()

        # defaults
        self.title = DEFAULT_TITLE
        self.output_format = 'html'
        self.reverse = False
        self.max_count = UNLIMITED
        self.status_filter = 'active'
        self.escape_urls = False

        self._parse_config()

    @staticmethod
    def _error_exit(errormsg):
        """Print an error message and exit with a status of 1

        Args:
            errormsg (str): the error message to display.

        """
        print(f'ERROR: {errormsg}.', file=sys.stderr)
        sys.exit(1)

    def _parse_config(self):
        """Read and parse the configuration file."""
        if not os.path.isfile(self.config_file):
            if self.require_config:
                raise ConfigurationError(
                    f"config file not found: {self.config_file}")
            return

        config = configparser.ConfigParser()
        try:
            config.read(self.config_file, encoding="utf-8")
        except configparser.Error as err:
            raise ConfigurationError(
                f"error reading config file: {err}") from err

        if "main" in config:
            main = config["main"]
            try:
                self.title = main.get("title", self.title, raw=True)
                self.output_format = main.get(
                    "format", self.output_format).lower()
                self.reverse = main.getboolean("reverse", self.reverse)
                self.max_count = main.getint("max", self.max_count)
                self.status_filter = main.get(
                    "status_filter", self.status_filter).lower()
                self.escape_urls = main.getboolean(
                    "escape_urls", self.escape_urls)
            except (ValueError, configparser.Error) as err:
                raise ConfigurationError(
                    f"invalid value in config file: {err}") from err

    def _read_input(self, in_file):
        """Read the whole dump from a file or stdin ('-')."""
        source = "stdin" if in_file == '-' else in_file
        try:
            if in_file == '-':
                return sys.stdin.read()
            with open(in_file, "r", encoding="utf-8") as dump_file:
                return dump_file.read()
        except UnicodeDecodeError as err:
            raise MalformedInputError(
                'syntax',
                f"{source} is not valid UTF-8 at position {err.start}",
                offset=err.start) from err
        except OSError as err:
            raise InputIOError(f"cannot read {source}: {err}") from err

    @staticmethod
    def _write_output(out_file, output):
        """Write the rendered document to a file or stdout ('-')."""
        if out_file == '-':
            sys.stdout.write(output)
            return
        try:
            with open(out_file, "w", encoding="utf-8") as output_file:
                output_file.write(output)
        except OSError as err:
            raise InputIOError(f"cannot write {out_file}: {err}") from err

    def make_options(self, args, now=None):
        """Merge command line arguments over the config file settings.

        Args:
            args (Namespace):   parsed command line arguments.
            now (datetime):     the current time (default is the clock).

        Returns:
            options (Options):  validated conversion options.

        """
        start = None
        end = None
        if args.start:
            start = make_time(args.start, self.ltz)
        if args.end:
            end = make_time(args.end, self.ltz)

        def _pick(value, default):
            return default if value is None else value

        options = Options(
            in_file=args.in_file,
            out_file=args.out_file,
            title=_pick(args.title, self.title),
            output_format=_pick(args.format, self.output_format),
            reverse=args.reverse or self.reverse,
            show_range=args.range,
            start=start,
            end=end,
            url_regex=compile_pattern(args.url_regex, "URL"),
            title_regex=compile_pattern(args.title_regex, "title"),
            max_count=_pick(args.max, self.max_count),
            status_filter=_pick(args.status, self.status_filter),
            escape_urls=args.escape_urls or self.escape_urls)
        validate_options(options, now=now)
        return options

    def run(self, options, now=None):
        """Convert the configured input and write the output.

        Nothing is written unless the whole conversion succeeds.

        """
        text = self._read_input(options.in_file)
        output = convert(text, options, ltz=self.ltz, now=now)
        self._write_output(options.out_file, output)


def parse_args(argv=None):
    """Parse command line arguments.

    Returns:
        args (dict):    the command line arguments provided.

    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description='Convert a Pocket JSON dump into a bookmark listing.',
        epilog=(
            "Times for --start and --end use RFC 3339 with optional "
            "time and time zone, defaulting to local time "
            "(2017-11-01[T00:00:00[-07:00]])."))
    parser.add_argument(
        '-c',
        '--config',
        dest='config',
        metavar='<file>',
        help='config file')
    parser.add_argument(
        '-i',
        '--in',
        dest='in_file',
        metavar='<file>',
        default='-',
        help='input file in JSON (default: stdin)')
    parser.add_argument(
        '-o',
        '--out',
        dest='out_file',
        metavar='<file>',
        default='-',
        help='output file (default: stdout)')
    parser.add_argument(
        '-t',
        '--title',
        dest='title',
        metavar='<title>',
        help=f'title of the output document (default: {DEFAULT_TITLE})')
    parser.add_argument(
        '-f',
        '--format',
        dest='format',
        choices=OUTPUT_FORMATS,
        help='output format (default: html)')
    parser.add_argument(
        '-r',
        '--reverse',
        dest='reverse',
        action='store_true',
        help='sort reverse-chronologically (most recent first)')
    parser.add_argument(
        '--range',
        dest='range',
        action='store_true',
        help='print the range of dates in the dump and exit')
    parser.add_argument(
        '-s',
        '--start',
        dest='start',
        metavar='<time>',
        help='only bookmarks added at or after this time '
             '(default: beginning of file)')
    parser.add_argument(
        '-e',
        '--end',
        dest='end',
        metavar='<time>',
        help='only bookmarks added at or before this time '
             '(default: now)')
    parser.add_argument(
        '--url-regex',
        dest='url_regex',
        metavar='<regex>',
        help='only bookmarks whose URL matches regex')
    parser.add_argument(
        '--title-regex',
        dest='title_regex',
        metavar='<regex>',
        help='only bookmarks whose title matches regex')
    parser.add_argument(
        '-m',
        '--max',
        dest='max',
        metavar='<n>',
        type=int,
        help='maximum number of bookmarks printed, -1 for unlimited')
    parser.add_argument(
        '--status',
        dest='status',
        choices=STATUS_FILTERS,
        help='active skips deleted items, unread keeps only unread '
             'items, none keeps everything (default: active)')
    parser.add_argument(
        '--escape-urls',
        dest='escape_urls',
        action='store_true',
        help='HTML-escape URLs in links')
    parser.add_argument(
        '-v',
        '--verbose',
        dest='verbose',
        action='store_true',
        help='print debugging information')
    parser.add_argument(
        '--version',
        dest='version',
        action='store_true',
        help='show version info')
    args = parser.parse_args(argv)
    return parser, args


def main(argv=None):
    """Entry point. Parses arguments, creates PocketDump() object and
    runs the conversion.
    """
    if os.environ.get("XDG_CONFIG_HOME"):
        config_file = os.path.join(
            os.path.expandvars(os.path.expanduser(
                os.environ["XDG_CONFIG_HOME"])), APP_NAME, "config")
    else:
        config_file = os.path.expandvars(
            os.path.expanduser(DEFAULT_CONFIG_FILE))

    _, args = parse_args(argv)

    if args.version:
        print(f"{APP_NAME} {APP_VERS}")
        print(APP_COPYRIGHT)
        print(APP_LICENSE)
        return

    logging.basicConfig(
        format=f"%(asctime)s:{logging.BASIC_FORMAT}",
        level=logging.DEBUG if args.verbose else logging.WARNING)

    require_config = False
    if args.config:
        config_file = os.path.expandvars(
            os.path.expanduser(args.config))
        require_config = True

    try:
        dumper = PocketDump(config_file, require_config)
        options = dumper.make_options(args)
        dumper.run(options)
    except PocketDumpError as err:
        PocketDump._error_exit(err)


# entry point
if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(1)
