import enum
from collections import namedtuple

import envi.bits as e_bits

from .bits import bit_is_set, split_field
from .registers import *
from .exc import FrequencyOverflowError, InvalidDividerError

import logging
logger = logging.getLogger(__name__)


__all__ = [
    'PllKind',
    'PllDescriptor',
    'PLLS',
    'decode_simple_pll',
    'decode_dithering_pll',
    'decode_pll',
    'select_outputs',
]


# PLL rates must fit in a 32-bit Hz value
RATE_MAX = e_bits.b_masks[32]

# The dithering PLL multiplier is m + k/1024
DITHER_SCALE = 1024


class PllKind(enum.IntEnum):
    SIMPLE    = 0
    DITHERING = 1


PllDescriptor = namedtuple('PllDescriptor', ['name', 'offset', 'size', 'kind', 'has_outdiv'])

# Only PLL0 and PLL1 have the secondary output divider stage
PLLS = (
    PllDescriptor('PLL0', 0x1c0, 0x20, PllKind.SIMPLE,    True),
    PllDescriptor('PLL1', 0x1e0, 0x20, PllKind.SIMPLE,    True),
    PllDescriptor('PLL2', 0x200, 0x20, PllKind.SIMPLE,    False),
    PllDescriptor('PLL3', 0x220, 0x30, PllKind.DITHERING, False),
)


def _check_rate(rate, regs):
    if rate > RATE_MAX:
        raise FrequencyOverflowError('PLL rate %d Hz does not fit in 32 bits' % rate,
                                     rate=rate, regs=regs)
    return rate


def _pll_divisor(regs):
    # f_out = f_in * M / (P * 2^S)
    p = regs.p.div
    s = regs.s.shift
    if p == 0:
        raise InvalidDividerError('PLL pre-divider P is 0', p=p, s=s)
    return p << s


def decode_simple_pll(region, inrate, has_outdiv):
    """
    Calculate the output rate of one of the integer-only PLLs.

    Parameters:
        region (bytes): the 0x20 bytes of PLL registers
        inrate (int): reference clock rate in Hz
        has_outdiv (bool): if the PLL has the secondary output divider

    Returns the PLL rate in Hz.  Bypass takes priority over reset.
    """
    regs = parse_region(CLKRESET_SIMPLE_PLL, region)

    if regs.ctl.bypass:
        return inrate
    if regs.ctl.reset:
        return 0

    m = split_field(regs.m_lo, regs.m_hi, 2)
    rate = _check_rate((inrate * m) // _pll_divisor(regs), regs)
    logger.debug('simple PLL: m=%d p=%d s=%d -> %d Hz', m, regs.p.div, regs.s.shift, rate)

    if not has_outdiv:
        return rate

    if regs.outdiv.bypass:
        return rate

    outdiv = regs.outdiv.div
    if outdiv == 0:
        raise InvalidDividerError('PLL output divider is 0', outdiv=outdiv, rate=rate)
    return rate // outdiv


def decode_dithering_pll(region, inrate):
    """
    Calculate the output rate of the dithering PLL, the multiplier has a
    fractional K/1024 component:

        f_out = f_in * (M + K/1024) / (P * 2^S)

    rounded to the nearest Hz.
    """
    regs = parse_region(CLKRESET_DITHER_PLL, region)

    if regs.ctl.bypass:
        return inrate
    if regs.ctl.reset:
        return 0

    m = split_field(regs.m_lo, regs.m_hi, 1)
    k = split_field(regs.k_lo, regs.k_hi, 4)

    num = inrate * (m * DITHER_SCALE + k)
    denom = _pll_divisor(regs)

    # Adding half of the scale rounds to the nearest Hz
    rate = _check_rate((num // denom + DITHER_SCALE // 2) // DITHER_SCALE, regs)
    logger.debug('dithering PLL: m=%d k=%d p=%d s=%d -> %d Hz', m, k, regs.p.div, regs.s.shift, rate)
    return rate


def decode_pll(desc, buf, inrate):
    """
    Decode the PLL described by desc from the full CLKRESET register dump
    """
    region = buf[desc.offset:desc.offset + desc.size]
    if desc.kind == PllKind.DITHERING:
        return decode_dithering_pll(region, inrate)
    else:
        return decode_simple_pll(region, inrate, desc.has_outdiv)


def select_outputs(generated, crystal, bypass_mask):
    """
    Each PLL output can be switched back to the crystal with its bit in the
    PLL bypass mask.
    """
    return [crystal if bit_is_set(bypass_mask, i) else rate
            for i, rate in enumerate(generated)]
