import sys
import logging
import os.path
import argparse

import envi.exc as e_exc
import envi.common as e_common
import envi.config as e_config

from .exc import XtalRateError


__all__ = [
    'ClkResetProject',
    'merge_dict',
    'parse_xtal',
]


logger = logging.getLogger(__name__)


# Crystal rates (in MHz) that the CLKRESET block can be clocked from
XTAL_MHZ = (24, 48)

USAGE_EPILOG = '''
Where DUMPFILE is a file containing a binary dump of registers values
from the CLKRESET region (0x904b0000-0x904b03ff).
And where the crystal rate, XTALRATE, is 24 or 48 (MHz)
'''


def merge_dict(base, update):
    if not (isinstance(base, dict) and isinstance(update, dict)):
        raise Exception('Cannot merge %r and %r' % (base, update))

    # Start the merged dict with unique keys from the base dict
    ret = dict((k, v) for k, v in base.items() if k not in update)

    # Add in any unique keys from the update dict
    ret.update((k, v) for k, v in update.items() if k not in base)

    # Merge the rest of the keys
    merge_keys = [k for k in base.keys() if k in update]
    for key in merge_keys:
        if isinstance(base[key], dict):
            ret[key] = merge_dict(base[key], update[key])
        else:
            # If the key is in both dicts the "update" dict has priority
            ret[key] = update[key]

    return ret


def parse_xtal(value):
    """
    Convert the crystal rate argument (in MHz) to Hz
    """
    # Only integers and integer strings are accepted
    if not isinstance(value, (int, str)) or isinstance(value, bool):
        raise XtalRateError('Invalid number: %r' % (value,), xtal=value)

    try:
        mhz = int(value)
    except (TypeError, ValueError):
        raise XtalRateError('Invalid number: %r' % (value,), xtal=value) from None

    if mhz not in XTAL_MHZ:
        raise XtalRateError('XTALRATE must be either %s.' % ' or '.join(str(x) for x in XTAL_MHZ), xtal=value)

    return mhz * 1000000


class ClkResetArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Invalid arguments are a normal failure (exit code 1), print the full
        usage so the expected dump file and crystal rate are explained.
        """
        self.print_help(sys.stderr)
        self.exit(1, '%s: error: %s\n' % (self.prog, message))


class ClkResetProject:
    defconfig = {
        'report': {
            'format': 'text',
            'hide_off': False,
        },
    }

    docconfig = {
        'report': {
            'format': 'Report output format (text/json)',
            'hide_off': 'Do not list clock generators and AXI gates that are OFF',
        },
    }

    def __init__(self, defconfig=None, docconfig=None, args=None, parser=None):
        """
        Parse the command line arguments and build the project configuration.

        The configuration starts with the class defaults, then is updated by
        the config file (if one is specified) and lastly by any -O options.
        """
        if parser is None:
            parser = ClkResetArgumentParser(prog='clkreset', epilog=USAGE_EPILOG,
                                            formatter_class=argparse.RawDescriptionHelpFormatter)

        parser.add_argument('-v', '--verbose', dest='verbose', default=0, action='count',
                            help='Enable verbose mode (multiples matter: -vv)')
        parser.add_argument('-c', '--config', default=None,
                            help='Path to a JSON configuration file')
        parser.add_argument('-O', '--option', default=None, action='append',
                            help='<secname>.<optname>=<optval> (optval must be json syntax)')
        parser.add_argument('dumpfile', metavar='DUMPFILE',
                            help='binary dump of the CLKRESET registers')
        parser.add_argument('xtal', metavar='XTALRATE',
                            help='crystal rate in MHz (24 or 48)')
        parsed_args = parser.parse_args(args)

        if defconfig is None:
            defconfig = {}

        if docconfig is None:
            docconfig = {}

        # Merge the defaults and docs provided with the class config
        defconfig = merge_dict(self.defconfig, defconfig)
        docconfig = merge_dict(self.docconfig, docconfig)

        # setup logging, warnings are always displayed and each -v enables the
        # next more verbose level
        levels = sorted((l for l in e_common.LOG_LEVELS if l <= logging.WARNING), reverse=True)
        self.verbose = min(parsed_args.verbose, len(levels)-1)
        level = levels[self.verbose]
        e_common.initLogging(logging.getLogger('clkreset'), level=level)
        logger.debug("LogLevel: %r  %r  %r", self.verbose, level, logging.getLevelName(level))

        cfgpath = parsed_args.config
        if cfgpath is not None and not os.path.isfile(cfgpath):
            logger.critical('Config file %s does not exist', cfgpath)
            sys.exit(1)

        self.config = e_config.EnviConfig(filename=cfgpath, defaults=defconfig, docs=docconfig, autosave=False)

        # Parse any command-line options
        if parsed_args.option is not None:
            for option in parsed_args.option:
                if option in ('-h', '?'):
                    logger.critical(self.config.reprConfigPaths())
                    logger.critical("syntax: \t-O <secname>.<optname>=<optval> (optval must be json syntax)")
                    sys.exit(1)

                try:
                    self.config.parseConfigOption(option)
                except e_exc.ConfigNoAssignment as e:
                    logger.critical(self.config.reprConfigPaths() + "\n")
                    logger.critical(e)
                    logger.critical("syntax: \t-O <secname>.<optname>=<optval> (optval must be json syntax)")
                    sys.exit(1)

                except Exception as e:
                    logger.critical(self.config.reprConfigPaths())
                    logger.critical("With entry: %s", option)
                    logger.critical(e)
                    sys.exit(1)

        self.args = parsed_args
