from .bits import bit_is_set
from .registers import *
from .pll import PLLS, decode_pll, select_outputs
from .clkgen import decode_clkgens
from .axigate import decode_axigates
from .exc import ShapeError, InvalidDividerError, GlobalBypassUnsupported, XtalRateError

import logging
logger = logging.getLogger(__name__)


__all__ = [
    'XTAL_RATES',
    'ClockTree',
    'check_global_bypass',
    'decode_clocktree',
]


# Supported crystal rates in Hz
XTAL_RATES = (24000000, 48000000)


class ClockTree:
    '''
    The decoded state of the CLKRESET clock tree.  All tables are kept in the
    same order that the PLLs and gates are declared in.
    '''
    def __init__(self, xtal, generated, outputs, clkgens, axigates):
        self.xtal = xtal
        self.generated = tuple(generated)
        self.outputs = tuple(outputs)
        self.clkgens = tuple(clkgens)
        self.axigates = tuple(axigates)

    @property
    def sources(self):
        """
        The clock generator mux inputs: PLL0-3 outputs followed by the crystal
        """
        return self.outputs + (self.xtal,)

    def plls(self):
        for desc, generated, output in zip(PLLS, self.generated, self.outputs):
            yield desc.name, generated, output

    def __eq__(self, other):
        return (self.__class__ == other.__class__) and \
                (vars(self) == vars(other))

    def __repr__(self):
        return '%s(xtal=%d, generated=%r, outputs=%r)' % \
                (self.__class__.__name__, self.xtal, self.generated, self.outputs)


def check_global_bypass(ctl):
    """
    The effect that the global PLL bypass has on the clock generators is not
    known, if it is set nothing else can be decoded.
    """
    if bit_is_set(ctl, CLKRESET_PLL_GCTL_BYPASS_BIT):
        raise GlobalBypassUnsupported('PLL global bypass bit is set, the effect on '
                                      'the clock generators is unknown', ctl=ctl)


def decode_clocktree(buf, xtal):
    """
    Decode the PLLs, clock generators and AXI clock gates from a CLKRESET
    register dump.

    Parameters:
        buf (bytes): the 0x400 bytes of the CLKRESET register block
        xtal (int): crystal rate in Hz

    Returns a ClockTree object
    """
    if len(buf) != CLKRESET_SIZE:
        raise ShapeError('CLKRESET dump must be 0x%x bytes, got 0x%x' % (CLKRESET_SIZE, len(buf)),
                         expected=CLKRESET_SIZE, size=len(buf))
    if xtal not in XTAL_RATES:
        raise XtalRateError('crystal rate must be one of %s Hz, got %r' % (XTAL_RATES, xtal), xtal=xtal)

    buf = bytes(buf)

    check_global_bypass(buf[CLKRESET_PLL_GCTL_OFFSET])

    generated = []
    for desc in PLLS:
        try:
            rate = decode_pll(desc, buf, xtal)
        except InvalidDividerError as exc:
            logger.warning('%s: %s, using 0 Hz', desc.name, exc)
            rate = 0
        generated.append(rate)

    outputs = select_outputs(generated, xtal, buf[CLKRESET_PLL_BYPASS_OFFSET])
    for desc, gen, out in zip(PLLS, generated, outputs):
        logger.info('%s: generated %d Hz, output %d Hz', desc.name, gen, out)

    srcs = list(outputs) + [xtal]
    clkgens = decode_clkgens(buf, srcs)
    axigates = decode_axigates(buf)

    return ClockTree(xtal, generated, outputs, clkgens, axigates)
