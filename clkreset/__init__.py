# Clock tree decoder for the CLKRESET register block

from .exc import *
from .pll import PLLS, decode_simple_pll, decode_dithering_pll, select_outputs
from .clkgen import CLKGENS, decode_clockgate
from .axigate import AXIGATES, decode_axigate
from .clocktree import ClockTree, check_global_bypass, decode_clocktree
from .dump import load_dump

import logging
logger = logging.getLogger(__name__)


__all__ = [
    'ClkResetError',
    'ShapeError',
    'FrequencyOverflowError',
    'InvalidDividerError',
    'GlobalBypassUnsupported',
    'DumpLoadError',
    'XtalRateError',

    'PLLS',
    'CLKGENS',
    'AXIGATES',
    'ClockTree',
    'decode_simple_pll',
    'decode_dithering_pll',
    'select_outputs',
    'decode_clockgate',
    'decode_axigate',
    'check_global_bypass',
    'decode_clocktree',
    'load_dump',
]
