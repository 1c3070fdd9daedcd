"""Value types for records going in and out of a scan"""

from collections import namedtuple

__all__ = ['ArchiveRecord', 'OutputRecord', 'decode']

KEY_SEPARATOR = ' '
VALUE_SEPARATOR = '\t'


def decode(value):
    """Turns an arc header value into text. Missing values become '',
    bytes that aren't utf-8 survive as surrogates so they can be
    written back out unchanged."""
    if value is None:
        return ''
    if isinstance(value, bytes):
        return value.decode('utf-8', 'surrogateescape')
    return value


class ArchiveRecord(namedtuple('ArchiveRecord',
                               'source_file url capture_date mime_type')):
    """The metadata of one captured resource: the name of the container
    it was read from, its url, archive date (as written in the arc, not
    reparsed) and mime type."""
    __slots__ = ()

    @classmethod
    def from_arc(cls, source_file, arc_record):
        """Builds a record from a hanzo.warctools ArcRecord, reading
        headers only."""
        return cls(source_file=decode(source_file),
                   url=decode(arc_record.url),
                   capture_date=decode(arc_record.date),
                   mime_type=decode(arc_record.get_header(arc_record.CONTENT_TYPE)))


class OutputRecord(namedtuple('OutputRecord', 'key value')):
    __slots__ = ()

    @classmethod
    def from_record(cls, record):
        key = KEY_SEPARATOR.join((record.source_file,
                                  record.url or '',
                                  record.mime_type or ''))
        return cls(key=key, value=record.capture_date or '')

    @property
    def line(self):
        return self.key + VALUE_SEPARATOR + self.value + '\n'
