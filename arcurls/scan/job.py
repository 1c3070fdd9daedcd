"""Runs a scan: inputs through a RecordFilter into an OutputWriter"""

import logging

from collections import deque
from concurrent.futures import ThreadPoolExecutor

from arcurls.scan.errors import ConfigurationError
from arcurls.scan.filter import RecordFilter
from arcurls.scan.reader import expand_inputs, read_container, read_records

__all__ = ['find_urls', 'scan_container', 'scan_names']

log = logging.getLogger(__name__)


def check_jobs(jobs):
    if jobs is None or jobs < 1:
        raise ConfigurationError('jobs must be at least 1, not %r' % (jobs,))


def scan_container(name, record_filter):
    """Matches for a single container, in container order."""
    return list(record_filter.filter(read_container(name)))


def scan_names(names, record_filter, writer, jobs=1):
    """Scans already expanded container names with a configured filter,
    returns how many records were scanned.

    With jobs > 1 containers are read in parallel, but their matches are
    still written in input order so repeated runs give the same output.
    At most jobs containers are in flight at once.
    """
    check_jobs(jobs)
    log.debug('%d containers to scan', len(names))

    if jobs == 1 or len(names) < 2:
        write_matches(writer, record_filter.filter(read_records(names)))
    else:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            pending = deque()
            for name in names:
                if len(pending) >= jobs:
                    write_matches(writer, pending.popleft().result())
                pending.append(executor.submit(scan_container, name, record_filter))
            while pending:
                write_matches(writer, pending.popleft().result())

    return record_filter.finalize()


def write_matches(writer, matches):
    for output in matches:
        writer.write(output)


def find_urls(inputs, pattern, writer, jobs=1):
    """Writes every record in inputs whose url matches pattern to
    writer, returns how many records were scanned. The pattern is
    compiled before any input is opened."""
    record_filter = RecordFilter()
    record_filter.configure(pattern)
    check_jobs(jobs)

    return scan_names(list(expand_inputs(inputs)), record_filter, writer, jobs=jobs)
