"""Exceptions raised while configuring or running a scan"""

__all__ = [
    'ArcUrlsError',
    'ConfigurationError',
    'InvalidPatternError',
    'RecordReadError',
    'OutputWriteError',
]


class ArcUrlsError(Exception):
    pass


class ConfigurationError(ArcUrlsError):
    """A required option is missing or has a bad value. Raised before
    any record is read."""
    pass


class InvalidPatternError(ConfigurationError):
    def __init__(self, pattern, error):
        ConfigurationError.__init__(self, 'invalid pattern %r: %s' % (pattern, error))
        self.pattern = pattern
        self.error = error


class RecordReadError(ArcUrlsError):
    """An archive container could not be opened or parsed."""
    def __init__(self, name, error):
        ArcUrlsError.__init__(self, 'error reading %s: %s' % (name, error))
        self.name = name
        self.error = error


class OutputWriteError(ArcUrlsError):
    def __init__(self, destination, error):
        ArcUrlsError.__init__(self, 'error writing %s: %s' % (destination, error))
        self.destination = destination
        self.error = error
