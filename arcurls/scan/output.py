"""Writes matched records as key<tab>value lines"""

import io
import logging
import os
import os.path
import shutil
import sys
import threading

from arcurls.scan.errors import ConfigurationError, OutputWriteError

__all__ = ['OutputWriter', 'check_destination', 'clear_destination']

log = logging.getLogger(__name__)

STDOUT = '-'


def clear_destination(destination):
    """Removes whatever is at destination, recursively for a directory.
    Returns True if something was removed."""
    if os.path.isdir(destination) and not os.path.islink(destination):
        shutil.rmtree(destination)
    elif os.path.lexists(destination):
        os.remove(destination)
    else:
        return False
    log.debug('cleared existing output %s', destination)
    return True


def same_or_inside(path, directory):
    path = os.path.realpath(path)
    directory = os.path.realpath(directory)
    return path == directory or path.startswith(directory.rstrip(os.sep) + os.sep)


def check_destination(destination, names):
    """Raises ConfigurationError if clearing destination would remove any
    of the input containers."""
    if destination == STDOUT:
        return
    for name in names:
        if name.startswith('s3:'):
            continue
        if same_or_inside(name, destination):
            raise ConfigurationError('output %s would overwrite input %s'
                                     % (destination, name))


class OutputWriter(object):
    """Line oriented sink for OutputRecords. Use as a context manager,
    or call open() and close(). Writes from several threads are
    serialised."""

    def __init__(self, destination, stream=None):
        self.destination = destination
        self.count = 0
        self._stream = stream
        self._owned = False
        self._wrapped = False
        self._lock = threading.Lock()

    def open(self):
        if self._stream is not None:
            return self

        try:
            if self.destination == STDOUT:
                stdout = sys.stdout
                stdout.flush()
                buffer = getattr(stdout, 'buffer', None)
                if buffer is None:
                    self._stream = stdout
                else:
                    # the binary buffer, so surrogates go out as their original bytes
                    self._stream = io.TextIOWrapper(buffer, encoding='utf-8',
                                                    errors='surrogateescape',
                                                    newline='', write_through=True)
                    self._wrapped = True
            else:
                clear_destination(self.destination)
                parent = os.path.dirname(self.destination)
                if parent and not os.path.isdir(parent):
                    os.makedirs(parent)
                self._stream = open(self.destination, 'w', encoding='utf-8',
                                    errors='surrogateescape', newline='')
                self._owned = True
        except OSError as e:
            raise OutputWriteError(self.destination, e) from e
        return self

    def write(self, output_record):
        if self._stream is None:
            raise OutputWriteError(self.destination, 'writer is not open')

        with self._lock:
            try:
                self._stream.write(output_record.line)
            except (OSError, UnicodeError) as e:
                raise OutputWriteError(self.destination, e) from e
            self.count += 1

    def close(self):
        stream, self._stream = self._stream, None
        if stream is None:
            return
        try:
            if self._owned:
                stream.close()
            else:
                stream.flush()
                if self._wrapped:
                    # leave sys.stdout open
                    stream.detach()
        except OSError as e:
            raise OutputWriteError(self.destination, e) from e
        finally:
            self._owned = False
            self._wrapped = False

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
