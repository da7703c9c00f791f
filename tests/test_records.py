"""Tests for searchwords/records.py"""

import unittest

from searchwords.records import LOG_PATTERN, LogRecord, parse_record

LINE = (
    '66.249.66.1 - - [10/Mar/2008:10:00:01 +0000] "GET /rust/ HTTP/1.1" 200 5120 '
    '"http://www.google.com/search?q=rust" "Mozilla/5.0 (X11)"'
)


class TestLogPattern(unittest.TestCase):
    def test_matches_combined_format(self):
        self.assertIsNotNone(LOG_PATTERN.match(LINE))

    def test_no_match_without_user_agent(self):
        line = '10.0.0.1 - - [01/Jan/2026:00:00:00 +0000] "GET / HTTP/1.1" 200 100'
        self.assertIsNone(LOG_PATTERN.match(line))

    def test_no_match_on_non_numeric_address(self):
        line = LINE.replace("66.249.66.1", "::1", 1)
        self.assertIsNone(LOG_PATTERN.match(line))


class TestParseRecord(unittest.TestCase):
    def test_fields(self):
        record = parse_record(LINE + "\n")
        self.assertTrue(record.parsed)
        self.assertEqual(record.client, "66.249.66.1")
        self.assertEqual(record.timestamp, "10/Mar/2008:10:00:01 +0000")
        self.assertEqual(record.request, "GET /rust/ HTTP/1.1")
        self.assertEqual(record.status, 200)
        self.assertEqual(record.size, "5120")
        self.assertEqual(record.referrer, "http://www.google.com/search?q=rust")

    def test_raw_preserved_without_newline(self):
        record = parse_record(LINE + "\n")
        self.assertEqual(record.raw, LINE)

    def test_user_agent_not_captured(self):
        self.assertIsNone(parse_record(LINE).browser)

    def test_dash_size_and_referrer(self):
        line = '10.0.0.1 - - [01/Jan/2008:00:00:00] "GET / HTTP/1.1" 304 - "-" "UA"'
        record = parse_record(line)
        self.assertTrue(record.parsed)
        self.assertEqual(record.size, "-")
        self.assertEqual(record.referrer, "-")

    def test_garbage_gives_empty_record(self):
        record = parse_record("not a log line at all")
        self.assertEqual(record, LogRecord(raw="not a log line at all"))
        self.assertFalse(record.parsed)

    def test_empty_line(self):
        record = parse_record("")
        self.assertFalse(record.parsed)
        self.assertIsNone(record.referrer)


if __name__ == "__main__":
    unittest.main()
