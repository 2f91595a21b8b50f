from collections import namedtuple

from .bits import bit_is_set

__all__ = [
    'AxiGateDescriptor',
    'AxiGateResult',
    'AXIGATES',
    'decode_axigate',
    'decode_axigates',
]


AxiGateDescriptor = namedtuple('AxiGateDescriptor', ['name', 'ctl_offset', 'bit'])
AxiGateResult = namedtuple('AxiGateResult', ['name', 'on'])

# The low 4 bits of 0x40 are the axi clock generator control, the rest of the
# bits in 0x40, 0x44 and 0x48 are the AXI clock gates.  Gates without a known
# peripheral are named <register>_<bit>.
AXIGATES = (
    AxiGateDescriptor('0_4',         0x40, 4),
    AxiGateDescriptor('dpi_cie',     0x40, 5),
    AxiGateDescriptor('dpi_decomp',  0x40, 6),
    AxiGateDescriptor('0_7',         0x40, 7),
    AxiGateDescriptor('dus',         0x44, 0),
    AxiGateDescriptor('ipsec_eape',  0x44, 1),
    AxiGateDescriptor('ipsec_spacc', 0x44, 2),
    AxiGateDescriptor('pfe_sys',     0x44, 3),
    AxiGateDescriptor('tdm',         0x44, 4),
    AxiGateDescriptor('i2cspi',      0x44, 5),
    AxiGateDescriptor('uart',        0x44, 6),
    AxiGateDescriptor('rtc',         0x44, 7),
    AxiGateDescriptor('pcie0',       0x48, 0),
    AxiGateDescriptor('pcie1',       0x48, 1),
    AxiGateDescriptor('sata',        0x48, 2),
    AxiGateDescriptor('usb0',        0x48, 3),
    AxiGateDescriptor('usb1',        0x48, 4),
    AxiGateDescriptor('2_5',         0x48, 5),
    AxiGateDescriptor('2_6',         0x48, 6),
    AxiGateDescriptor('2_7',         0x48, 7),
)


def decode_axigate(ctl, bit):
    return bit_is_set(ctl, bit)


def decode_axigates(buf, axigates=AXIGATES):
    return [AxiGateResult(desc.name, decode_axigate(buf[desc.ctl_offset], desc.bit))
            for desc in axigates]
