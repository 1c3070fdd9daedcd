from .errors import (ArcUrlsError, ConfigurationError, InvalidPatternError,
                     RecordReadError, OutputWriteError)
from .record import ArchiveRecord, OutputRecord
from .filter import RecordFilter, ScanCounter
from .reader import expand_inputs, read_container, read_records
from .output import OutputWriter, check_destination
from .job import find_urls, scan_names
from . import errors, record, filter, reader, output, job, log

__all__ = [
    'ArcUrlsError',
    'ConfigurationError',
    'InvalidPatternError',
    'RecordReadError',
    'OutputWriteError',
    'ArchiveRecord',
    'OutputRecord',
    'RecordFilter',
    'ScanCounter',
    'expand_inputs',
    'read_container',
    'read_records',
    'OutputWriter',
    'check_destination',
    'find_urls',
    'scan_names',
    'errors',
    'record',
    'filter',
    'reader',
    'output',
    'job',
    'log',
]
