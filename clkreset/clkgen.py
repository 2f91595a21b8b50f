from collections import namedtuple

from .bits import bitfield, bit_is_set

import logging
logger = logging.getLogger(__name__)


__all__ = [
    'ClockGateDescriptor',
    'ClockGateResult',
    'CLKGENS',
    'decode_clockgate',
    'decode_clkgens',
]


# Clock generator control register:
#   bit 0    - clock enable
#   bits 3:1 - source mux (PLL0-3 outputs, crystal)
CLKGEN_CTL_ENABLE_BIT   = 0
CLKGEN_CTL_MUX_SHIFT    = 1
CLKGEN_CTL_MUX_WIDTH    = 3

# Clock generator divider register bits 4:0
CLKGEN_DIV_WIDTH        = 5

# Dividers below 2 are not valid according to the hardware documentation
CLKGEN_DIV_MIN          = 2


ClockGateDescriptor = namedtuple('ClockGateDescriptor', ['name', 'ctl_offset', 'div_offset', 'bypass'])
ClockGateResult = namedtuple('ClockGateResult', ['name', 'on', 'rate'])

CLKGENS = (
    ClockGateDescriptor('axi',       0x040, 0x04c, False),
    ClockGateDescriptor('a9dp',      0x080, 0x084, False),
    ClockGateDescriptor('l2cc',      0x090, 0x094, False),
    ClockGateDescriptor('tpi',       0x0a0, 0x0a4, False),
    ClockGateDescriptor('csys',      0x0b0, 0x0b4, False),
    ClockGateDescriptor('extphy0',   0x0c0, 0x0c4, False),
    ClockGateDescriptor('extphy1',   0x0d0, 0x0d4, False),
    ClockGateDescriptor('extphy2',   0x0e0, 0x0e4, False),
    ClockGateDescriptor('ddr',       0x0f0, 0x0f4, False),
    ClockGateDescriptor('pfe',       0x100, 0x104, False),
    ClockGateDescriptor('ipsec',     0x110, 0x114, False),
    ClockGateDescriptor('dect',      0x120, 0x124, False),
    ClockGateDescriptor('gemtx',     0x130, 0x134, False),
    ClockGateDescriptor('tdmntg',    0x140, 0x144, False),
    ClockGateDescriptor('tsuntg',    0x150, 0x154, False),
    ClockGateDescriptor('sata_pmu',  0x160, 0x164, False),
    ClockGateDescriptor('sata_oob',  0x170, 0x174, False),
    ClockGateDescriptor('sata_occ',  0x180, 0x184, False),
    ClockGateDescriptor('pcie_occ',  0x190, 0x194, False),
    ClockGateDescriptor('sgmii_occ', 0x1a0, 0x1a4, False),
)


def decode_clockgate(ctl, divctl, srcs, bypass, name=None):
    """
    Determine the state and rate of a clock generator.

    Parameters:
        ctl (int): the clock generator control register value
        divctl (int): the divider register value, or None if this clock
                      generator has no divider
        srcs (list): the rates that can be selected by the mux, the 4 PLL
                     outputs followed by the crystal
        bypass (bool): if the divider is statically bypassed
        name (str) optional: used to identify the clock in warnings

    Returns a tuple of (on, rate)
    """
    on = bit_is_set(ctl, CLKGEN_CTL_ENABLE_BIT)
    prefix = 'clkgen' if name is None else 'clkgen %s' % name
    mux = bitfield(ctl, CLKGEN_CTL_MUX_SHIFT, CLKGEN_CTL_MUX_WIDTH)

    if mux >= len(srcs):
        logger.warning('%s: mux %d is outside known range.', prefix, mux)
        inrate = 0
    else:
        inrate = srcs[mux]

    if divctl is None or bypass:
        return on, inrate

    div = bitfield(divctl, 0, CLKGEN_DIV_WIDTH)
    if div < CLKGEN_DIV_MIN:
        logger.warning('%s: divider value %d is less than %d.', prefix, div, CLKGEN_DIV_MIN)
        return on, 0

    return on, inrate // div


def decode_clkgens(buf, srcs, clkgens=CLKGENS):
    results = []
    for desc in clkgens:
        divctl = buf[desc.div_offset] if desc.div_offset is not None else None
        on, rate = decode_clockgate(buf[desc.ctl_offset], divctl, srcs, desc.bypass, name=desc.name)
        results.append(ClockGateResult(desc.name, on, rate))
    return results
