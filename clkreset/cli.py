import sys

from .project import ClkResetProject, parse_xtal
from .dump import load_dump
from .clocktree import decode_clocktree
from .report import render
from .exc import ClkResetError

import logging
logger = logging.getLogger(__name__)


__all__ = [
    'main',
]


def main(args=None):
    """
    Decode a CLKRESET register dump and print the clock tree.

    Returns the process exit code: 0 on success, 1 if the dump could not be
    decoded.
    """
    prj = ClkResetProject(args=args)
    cfg = prj.config.report

    try:
        xtal = parse_xtal(prj.args.xtal)
        buf = load_dump(prj.args.dumpfile)
        tree = decode_clocktree(buf, xtal)
        lines = render(tree, cfg.format, hide_off=cfg.hide_off)

    except ClkResetError as exc:
        logger.critical('%s', exc)
        return 1

    except ValueError as exc:
        # Invalid report configuration
        logger.critical('%s', exc)
        return 1

    for line in lines:
        print(line)

    return 0


if __name__ == '__main__':
    sys.exit(main())
