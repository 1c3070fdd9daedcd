"""Reads arc containers with hanzo.warctools, yielding ArchiveRecords"""

import logging
import os
import os.path

from contextlib import closing

from hanzo.warctools import ArcRecord, expand_files

from arcurls.scan.errors import RecordReadError
from arcurls.scan.record import ArchiveRecord

__all__ = ['expand_inputs', 'read_container', 'read_records', 'source_name']

log = logging.getLogger(__name__)

# hadoop style output and checksum files, editor droppings
HIDDEN_PREFIXES = ('.', '_')


def split_inputs(inputs):
    for item in inputs:
        for name in item.split(','):
            name = name.strip()
            if name:
                yield name


def expand_inputs(inputs, exclude=()):
    """Expands a list of inputs into container names. An input can be a
    comma separated list, a directory (its visible files, sorted), an
    s3:// prefix or a path. Files in exclude are left out of directory
    listings."""
    excluded = set(os.path.realpath(path) for path in exclude)
    for name in split_inputs(inputs):
        if name.startswith('s3:'):
            try:
                for s3_name in expand_files([name]):
                    yield s3_name
            except Exception as e:
                raise RecordReadError(name, e) from e

        elif os.path.isdir(name):
            for entry in sorted(os.listdir(name)):
                if entry.startswith(HIDDEN_PREFIXES):
                    continue
                path = os.path.join(name, entry)
                if os.path.isfile(path) and os.path.realpath(path) not in excluded:
                    yield path
        else:
            yield name


def source_name(name):
    """The bare file name of a container, without its directory or
    bucket."""
    return os.path.basename(name.rstrip('/'))


def read_container(name, file_handle=None):
    """Yields an ArchiveRecord for every record in the container, in
    order. Any error opening or parsing is raised as RecordReadError."""
    source_file = source_name(name)
    log.debug('reading %s', name)

    try:
        if file_handle is None:
            fh = ArcRecord.open_archive(filename=name, gzip="auto")
        else:
            fh = ArcRecord.open_archive(file_handle=file_handle, gzip="auto")

        with closing(fh):
            for (offset, record, errors) in fh.read_records(limit=None, offsets=False):
                if record:
                    yield ArchiveRecord.from_arc(source_file, record)
                elif errors:
                    raise RecordReadError(name, ", ".join(str(e) for e in errors))

    except RecordReadError:
        raise
    except Exception as e:
        raise RecordReadError(name, e) from e


def read_records(names):
    for name in names:
        for record in read_container(name):
            yield record
