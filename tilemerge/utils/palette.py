"""
Map tile values to palette entries for drawing.
"""

# ##: One color per exponent: index 0 is the empty cell, index k the tile 2**k.
BLOCK_COLORS = (
    "#E1E1E1",  # empty
    "#FFCC15",  # 2
    "#FB923C",  # 4
    "#F87171",  # 8
    "#60A5FA",  # 16
    "#4ADE80",  # 32
    "#A3E635",  # 64
    "#34D399",  # 128
    "#2DD4BF",  # 256
    "#818CF8",  # 512
    "#A78BFA",  # 1024
    "#C084FC",  # 2048
    "#E879F9",  # 4096
    "#FB7185",  # 8192
)

EMPTY_INDEX = 0


def color_index(value: int) -> int:
    """
    Compute the palette index of a tile.

    Parameters
    ----------
    value : int
        The tile value, 0 or a power of two.

    Returns
    -------
    int
        ``log2(value)`` for a tile, 0 for an empty cell.

    Notes
    -----
    - Indices are not clamped: tiles above 8192 give indices past the end of ``BLOCK_COLORS``.
    """
    if value == 0:
        return EMPTY_INDEX
    return int(value).bit_length() - 1


def tile_color(value: int) -> str:
    """
    Pick the color used to draw a tile.

    Parameters
    ----------
    value : int
        The tile value.

    Returns
    -------
    str
        A hexadecimal color. Tiles beyond the palette reuse its last color.
    """
    return BLOCK_COLORS[min(color_index(value), len(BLOCK_COLORS) - 1)]
