import vstruct.primitives as vs_prims

from vstruct import VStruct, isVstructType
from vstruct.bitfield import VBitField, v_bits

from .exc import ShapeError

import logging
logger = logging.getLogger(__name__)


__all__ = [
    'CLKRESET_SIZE',
    'CLKRESET_PLL_GCTL_OFFSET',
    'CLKRESET_PLL_BYPASS_OFFSET',
    'CLKRESET_PLL_GCTL_BYPASS_BIT',
    'RegisterSet',
    'CLKRESET_PLL_P',
    'CLKRESET_PLL_S',
    'CLKRESET_PLL_CTL',
    'CLKRESET_PLL_OUTDIV',
    'CLKRESET_SIMPLE_PLL',
    'CLKRESET_DITHER_PLL',
    'parse_region',
]


# The CLKRESET block lives at 0x904b0000-0x904b03ff
CLKRESET_SIZE                   = 0x400

# PLL global control, bit 0 is the global PLL bypass
CLKRESET_PLL_GCTL_OFFSET        = 0x34
CLKRESET_PLL_GCTL_BYPASS_BIT    = 0

# Per-output PLL bypass mask, bit n selects the crystal for PLL output n
CLKRESET_PLL_BYPASS_OFFSET      = 0x38


class RegisterSet(VStruct):
    """
    VStruct customized class that places byte registers at fixed offsets in a
    fixed size block.  The gaps between registers are filled with v_bytes
    padding so the standard VStruct vsParse() can be used on a raw block of
    register data.

    Registers are added in increasing offset order using (offset, field)
    tuples, for example:

        class CLKRESET_SIMPLE_PLL(RegisterSet):
            def __init__(self):
                super().__init__(0x20)
                self.m_lo = (0x00, v_uint8())
                self.m_hi = (0x04, v_uint8())
                ...
                self.vsFinalize()
    """
    def __init__(self, size):
        super().__init__()
        self._rs_size = size
        self._rs_offsets = {}

    def __setattr__(self, name, value):
        """
        If the value provided is a tuple where the first element is an integer
        and the second element is a VStruct type then the field is registered
        at that specific offset.
        """
        if isinstance(value, tuple) and len(value) == 2 and \
                isinstance(value[0], int) and isVstructType(value[1]):
            return self.vsAddRegister(name, value[0], value[1])

        return super().__setattr__(name, value)

    def vsAddRegister(self, name, offset, field):
        end = len(self)
        if offset < end:
            raise ValueError('Register %s@0x%x overlaps with previous register (end 0x%x)' % (name, offset, end))

        if offset > end:
            self.vsAddField('_pad%03x' % end, vs_prims.v_bytes(size=offset - end))

        self.vsAddField(name, field)
        self._rs_offsets[name] = offset

    def vsFinalize(self):
        """
        Pad out the remainder of the block once all registers are added
        """
        end = len(self)
        if end > self._rs_size:
            raise ValueError('%s registers extend past 0x%x' % (self.__class__.__name__, self._rs_size))
        if end < self._rs_size:
            self.vsAddField('_pad%03x' % end, vs_prims.v_bytes(size=self._rs_size - end))

    def vsGetRegisterOffset(self, name):
        return self._rs_offsets[name]


class CLKRESET_PLL_P(VBitField):
    def __init__(self):
        super().__init__()
        self._pad0 = v_bits(2)
        self.div = v_bits(6)

class CLKRESET_PLL_S(VBitField):
    def __init__(self):
        super().__init__()
        self._pad0 = v_bits(5)
        self.shift = v_bits(3)

class CLKRESET_PLL_CTL(VBitField):
    def __init__(self):
        super().__init__()
        self._pad0 = v_bits(3)
        self.bypass = v_bits(1)
        self._pad1 = v_bits(3)
        self.reset = v_bits(1)

class CLKRESET_PLL_OUTDIV(VBitField):
    def __init__(self):
        super().__init__()
        self.bypass = v_bits(1)
        self._pad0 = v_bits(2)
        self.div = v_bits(5)


class CLKRESET_SIMPLE_PLL(RegisterSet):
    def __init__(self):
        super().__init__(0x20)
        self.m_lo   = (0x00, vs_prims.v_uint8())
        self.m_hi   = (0x04, vs_prims.v_uint8())
        self.p      = (0x08, CLKRESET_PLL_P())
        self.s      = (0x0c, CLKRESET_PLL_S())
        self.ctl    = (0x10, CLKRESET_PLL_CTL())
        self.outdiv = (0x1c, CLKRESET_PLL_OUTDIV())
        self.vsFinalize()


class CLKRESET_DITHER_PLL(RegisterSet):
    def __init__(self):
        super().__init__(0x30)
        self.m_lo   = (0x00, vs_prims.v_uint8())
        self.m_hi   = (0x04, vs_prims.v_uint8())
        self.p      = (0x08, CLKRESET_PLL_P())
        self.s      = (0x0c, CLKRESET_PLL_S())
        self.ctl    = (0x10, CLKRESET_PLL_CTL())
        self.k_lo   = (0x20, vs_prims.v_uint8())
        self.k_hi   = (0x24, vs_prims.v_uint8())
        self.vsFinalize()


def parse_region(regcls, data):
    """
    Create a register set of the specified class and parse data into it.  The
    data must be exactly the size of the register set.
    """
    regs = regcls()
    if len(data) != len(regs):
        raise ShapeError('%s must be 0x%x bytes wide, got 0x%x' % (regcls.__name__, len(regs), len(data)),
                         expected=len(regs), size=len(data))

    regs.vsParse(bytes(data))
    logger.debug('%s:\n%s', regcls.__name__, regs.tree())
    return regs
