import envi.bits as e_bits

__all__ = [
    'bitfield',
    'bit_is_set',
    'split_field',
]


def bitfield(value, shift, width):
    """
    Extract the <width> bit wide field that starts at bit <shift> of value
    """
    return (value >> shift) & e_bits.b_masks[width]


def bit_is_set(value, bit):
    return bitfield(value, bit, 1) != 0


def split_field(lo, hi, hi_width):
    """
    Several CLKRESET fields are wider than a byte, the lower 8 bits live in one
    register and the remaining bits are in the low bits of another register:

        field = lo[7:0] | hi[hi_width-1:0] << 8

    Parameters:
        lo (int): byte holding the lower 8 bits of the field
        hi (int): byte holding the upper bits of the field
        hi_width (int): how many bits of hi belong to the field
    """
    return (lo & 0xFF) | (bitfield(hi, 0, hi_width) << 8)
