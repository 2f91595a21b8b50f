import os.path

from .registers import CLKRESET_SIZE
from .exc import DumpLoadError

import logging
logger = logging.getLogger(__name__)


__all__ = [
    'load_dump',
]


def load_dump(filename, size=CLKRESET_SIZE):
    """
    Read the CLKRESET register block from a binary dump file.  Only the first
    0x400 bytes are used so a dump that continues past the end of the CLKRESET
    region is still accepted.
    """
    try:
        with open(filename, 'rb') as f:
            data = f.read(size)
    except OSError as exc:
        raise DumpLoadError('Failed to open %s: %s' % (filename, exc), filename=filename) from exc

    if len(data) < size:
        raise DumpLoadError('Failed to read first 0x%x bytes of %s (only 0x%x bytes)' % (size, filename, len(data)),
                            filename=filename, size=len(data))

    filesize = os.path.getsize(filename)
    if filesize > size:
        logger.debug('Ignoring 0x%x bytes past the end of the CLKRESET block in %s', filesize - size, filename)

    return data
