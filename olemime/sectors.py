'''
Sectors start right after the header: the sector with index N is
located at 512 + N * 2**exponent where the exponent is the one declared
into the header (9 for the usual 512 bytes sectors).
'''
HEADER_SIZE = 512

# offsets are unsigned 64 bits
MAX_OFFSET = (1 << 64) - 1


def int_power(base: int, exponent: int) -> int:
    '''Exact exponentiation by squaring, no floating point involved.'''
    if exponent < 0:
        raise ValueError(f'negative exponent {exponent}')

    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1

    return result


def sector_size(sector_size_exponent: int) -> int:
    return int_power(2, sector_size_exponent)


def sector_offset(sector_index: int, sector_size_exponent: int) -> int:
    if sector_index < 0:
        raise ValueError(f'negative sector index {sector_index}')

    offset = HEADER_SIZE + sector_index * sector_size(sector_size_exponent)

    if offset > MAX_OFFSET:
        raise OverflowError(f'sector {sector_index} with exponent {sector_size_exponent} is past the addressable range')

    return offset
