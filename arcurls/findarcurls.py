#!/usr/bin/env python
"""findarcurls - writes the arc records whose url matches a regexp, one
'file url mime-type<tab>date' line per record"""

import logging
import sys

from optparse import OptionParser

from .scan import log as scan_log
from .scan import (ConfigurationError, RecordReadError, OutputWriteError,
                   RecordFilter, OutputWriter, check_destination, expand_inputs,
                   scan_names)

TOOL_NAME = 'findarcurls'

parser = OptionParser(usage="%prog [options] -i arc[,arc...] -o output -p pattern [arc arc ...]")

parser.add_option("-i", "--input", dest="input", action="append", metavar="PATH",
                  help="input path, may be repeated or comma separated")
parser.add_option("-o", "--output", dest="output", metavar="PATH",
                  help="output path, cleared before writing")
parser.add_option("-p", "--pattern", dest="pattern", metavar="REGEXP",
                  help="url pattern, must match the whole url")
parser.add_option("-j", "--jobs", dest="jobs", type="int",
                  help="number of containers to read in parallel")
parser.add_option("-L", "--log-level", dest="log_level")

parser.set_defaults(input=None, output=None, pattern=None, jobs=1, log_level="info")

log = logging.getLogger('arcurls.findarcurls')


def check_options(options, args):
    """Returns the list of inputs and a configured RecordFilter, raises
    ConfigurationError for anything missing or invalid."""
    inputs = list(options.input or []) + list(args)
    if not inputs:
        raise ConfigurationError('missing input')
    if not options.output:
        raise ConfigurationError('missing output')
    if options.jobs < 1:
        raise ConfigurationError('jobs must be at least 1')

    # compile now, so a bad pattern fails before the output is cleared
    record_filter = RecordFilter()
    record_filter.configure(options.pattern)
    return inputs, record_filter


def usage_error(message):
    parser.print_help(sys.stderr)
    print("error: %s" % message, file=sys.stderr)
    return -1


def main(argv):
    (options, args) = parser.parse_args(args=argv[1:])

    try:
        scan_log.configure(options.log_level)
        inputs, record_filter = check_options(options, args)
    except ConfigurationError as e:
        return usage_error(e)

    log.info("Running %s with args %s", TOOL_NAME, argv[1:])
    log.info("Tool name: %s", TOOL_NAME)
    log.info(" - input: %s", ",".join(inputs))
    log.info(" - output: %s", options.output)

    try:
        # expand before the output is cleared, and never list the output itself
        exclude = [] if options.output == '-' else [options.output]
        names = list(expand_inputs(inputs, exclude=exclude))
        check_destination(options.output, names)
    except ConfigurationError as e:
        return usage_error(e)
    except RecordReadError as e:
        log.error(str(e))
        return -1

    try:
        with OutputWriter(options.output) as writer:
            total = scan_names(names, record_filter, writer, jobs=options.jobs)
    except (RecordReadError, OutputWriteError) as e:
        log.error(str(e))
        return -1

    log.info("Read %d records.", total)
    return 0


def run():
    sys.exit(main(sys.argv))


if __name__ == '__main__':
    run()
