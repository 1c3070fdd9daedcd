"""Filters archive records on a regular expression over their url"""

import logging
import re
import threading

from arcurls.scan.errors import ConfigurationError, InvalidPatternError
from arcurls.scan.record import OutputRecord

__all__ = ['ScanCounter', 'RecordFilter']

log = logging.getLogger(__name__)


class ScanCounter(object):
    """Counts records seen by a scan, whether they matched or not. Safe
    to share between threads."""

    def __init__(self, value=0):
        self._value = value
        self._lock = threading.Lock()

    def increment(self, n=1):
        with self._lock:
            self._value += n
            return self._value

    def add(self, other):
        """Sums another worker's counter into this one."""
        return self.increment(other.value)

    @property
    def value(self):
        with self._lock:
            return self._value

    def __int__(self):
        return self.value

    def __repr__(self):
        return 'ScanCounter(%d)' % self.value


class RecordFilter(object):
    """Keeps the records whose whole url matches a pattern.

    The pattern is anchored at both ends: 'example\\.com/.*' does not
    match 'http://example.com/page'. Records without a url are matched
    as the empty string.

    process() can be called from several threads at once, the only
    state it changes is the counter.
    """

    def __init__(self, pattern=None, counter=None):
        self.counter = counter if counter is not None else ScanCounter()
        self.pattern = None
        self._regex = None
        if pattern is not None:
            self.configure(pattern)

    def configure(self, pattern):
        if pattern is None:
            raise ConfigurationError('missing pattern')

        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise InvalidPatternError(pattern, e) from e

        self.pattern = pattern
        self._regex = regex

    @property
    def configured(self):
        return self._regex is not None

    def matches(self, url):
        return self._regex.fullmatch(url or '') is not None

    def process(self, record):
        """Counts the record, and returns its OutputRecord if the url
        matches or None if it does not."""
        if self._regex is None:
            raise ConfigurationError('pattern not configured')

        self.counter.increment()

        if self.matches(record.url):
            return OutputRecord.from_record(record)
        return None

    def filter(self, records):
        for record in records:
            output = self.process(record)
            if output is not None:
                yield output

    def finalize(self):
        total = self.counter.value
        log.debug('scanned %d records for %r', total, self.pattern)
        return total
