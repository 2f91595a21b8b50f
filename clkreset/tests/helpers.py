import os
import unittest

import envi.common as e_common

from ..registers import CLKRESET_SIZE, CLKRESET_PLL_GCTL_OFFSET, CLKRESET_PLL_BYPASS_OFFSET
from ..pll import PLLS, PllKind

import logging
logger = logging.getLogger(__name__)


__all__ = [
    'ClkResetTest',
    'XTAL_24MHZ',
    'XTAL_48MHZ',
    'PLL_CTL_RESET',
    'PLL_CTL_BYPASS',
    'PLL_OUTDIV_BYPASS',
    'simple_pll_region',
    'dither_pll_region',
    'clkgen_ctl',
    'make_dump',
]


XTAL_24MHZ = 24000000
XTAL_48MHZ = 48000000

PLL_CTL_RESET     = 0x01
PLL_CTL_BYPASS    = 0x10
PLL_OUTDIV_BYPASS = 0x80


def simple_pll_region(m=0, p=1, s=0, ctl=0, outdiv=0):
    """
    Build the 0x20 byte register region of a simple PLL
    """
    region = bytearray(0x20)
    region[0x00] = m & 0xFF
    region[0x04] = (m >> 8) & 0xFF
    region[0x08] = p
    region[0x0c] = s
    region[0x10] = ctl
    region[0x1c] = outdiv
    return bytes(region)


def dither_pll_region(m=0, k=0, p=1, s=0, ctl=0):
    """
    Build the 0x30 byte register region of the dithering PLL
    """
    region = bytearray(0x30)
    region[0x00] = m & 0xFF
    region[0x04] = (m >> 8) & 0xFF
    region[0x08] = p
    region[0x0c] = s
    region[0x10] = ctl
    region[0x20] = k & 0xFF
    region[0x24] = (k >> 8) & 0xFF
    return bytes(region)


def clkgen_ctl(mux, on=True):
    return (mux << 1) | int(on)


def make_dump(plls=None, gctl=0, pll_bypass=0, regs=None):
    """
    Build a full CLKRESET register dump.

    Parameters:
        plls (list) optional: 4 PLL regions, by default every PLL is bypassed
        gctl (int): PLL global control register value
        pll_bypass (int): PLL output bypass mask
        regs (dict) optional: {offset: value} of additional byte registers
    """
    if plls is None:
        plls = [dither_pll_region(ctl=PLL_CTL_BYPASS) if desc.kind == PllKind.DITHERING
                else simple_pll_region(ctl=PLL_CTL_BYPASS) for desc in PLLS]

    buf = bytearray(CLKRESET_SIZE)
    for desc, region in zip(PLLS, plls):
        assert len(region) == desc.size
        buf[desc.offset:desc.offset + desc.size] = region

    buf[CLKRESET_PLL_GCTL_OFFSET] = gctl
    buf[CLKRESET_PLL_BYPASS_OFFSET] = pll_bypass

    if regs is not None:
        for offset, value in regs.items():
            buf[offset] = value

    return bytes(buf)


class ClkResetTest(unittest.TestCase):
    def setUp(self):
        if os.environ.get('LOG_LEVEL', 'INFO') == 'DEBUG':
            e_common.initLogging(logging.getLogger('clkreset'), logging.DEBUG)
