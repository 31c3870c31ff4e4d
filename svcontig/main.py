#!python
import argparse
import logging
import platform
import sys
import time

from . import __version__
from . import config as _config
from .chimeric.constants import DEFAULTS as CHIMERIC_DEFAULTS
from .chimeric import main as chimeric_main
from .constants import EXIT_OK, SUBCOMMAND, ConstantNamespace
from . import util as _util


def main(argv=None):
    """
    sets up the parser and checks the validity of command line args
    then redirects into subcommand main functions

    Args:
        argv (list): List of arguments, defaults to command line arguments
    """
    if argv is None:  # need to do at run time or patching will not behave as expected
        argv = sys.argv[1:]
    start_time = int(time.time())

    parser = argparse.ArgumentParser(formatter_class=_config.CustomHelpFormatter)
    _config.augment_parser(['version'], parser)
    subp = parser.add_subparsers(dest='command', help='specifies which subprogram to use')
    subp.required = True
    required = {}  # hold required argument group by subparser command name
    optional = {}  # hold optional argument group by subparser command name
    for command in SUBCOMMAND.values():
        subparser = subp.add_parser(command, formatter_class=_config.CustomHelpFormatter, add_help=False)
        required[command] = subparser.add_argument_group('required arguments')
        optional[command] = subparser.add_argument_group('optional arguments')
        _config.augment_parser(['help', 'version', 'log', 'log_level'], optional[command])
        required[command].add_argument(
            '-n', '--inputs', nargs='+', help='path to the input files', required=True, metavar='FILEPATH')
        required[command].add_argument('-o', '--output', help='path to the output file', required=True, metavar='FILEPATH')

    # call
    optional[SUBCOMMAND.CALL].add_argument(
        '--binary_output', default=None, metavar='FILEPATH', help='also write the junctions as binary records to this file')
    _config.augment_parser(list(CHIMERIC_DEFAULTS.keys()), optional[SUBCOMMAND.CALL])

    args = ConstantNamespace(**parser.parse_args(argv).__dict__)

    log_conf = {'format': '{message}', 'style': '{', 'level': args.log_level}

    original_logging_handlers = logging.root.handlers[:]
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    if args.log:  # redirect stdout AND stderr to a log file
        log_conf['filename'] = args.log
    logging.basicConfig(**log_conf)

    _util.LOG('svcontig: {}'.format(__version__))
    _util.LOG('hostname:', platform.node(), time_stamp=False)
    _util.log_arguments(args)

    try:
        args.inputs = _util.bash_expands(*args.inputs)
    except FileNotFoundError:
        parser.error('--inputs file(s) for {} {} do not exist'.format(args.command, args.inputs))

    command = args.command
    log_to_file = args.log
    kwargs = {k: v for k, v in args.items() if k not in {'command', 'log', 'log_level'}}

    try:
        if command == SUBCOMMAND.CALL:
            chimeric_main.main(**kwargs)
        else:
            chimeric_main.decode_main(**kwargs)
        duration = int(time.time()) - start_time
        _util.LOG('run time (s): {}'.format(duration), time_stamp=False)
        return EXIT_OK
    except Exception as err:
        if log_to_file:
            logging.exception(err)  # capture the error in the logging output file
        raise err
    finally:
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        for handler in original_logging_handlers:
            logging.root.addHandler(handler)


if __name__ == '__main__':
    main()
