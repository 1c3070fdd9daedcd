import logging

from arcurls.scan.errors import ConfigurationError

__all__ = ['LEVELS', 'configure']

LEVELS = {'debug': logging.DEBUG,
          'info': logging.INFO,
          'warning': logging.WARNING,
          'error': logging.ERROR,
          'critical': logging.CRITICAL}

FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def configure(level_name="info"):
    """Set up logging for a command line run, level_name is one of
    LEVELS."""
    try:
        level = LEVELS[level_name.lower()]
    except KeyError:
        raise ConfigurationError('unknown log level %r, expected one of %s'
                                 % (level_name, ', '.join(sorted(LEVELS))))

    logging.basicConfig(level=level, format=FORMAT)
    logging.getLogger('arcurls').setLevel(level)
    return level
