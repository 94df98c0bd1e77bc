"""Embedded OpenType (EOT) wrapping of TrueType data.

An EOT file is a little-endian header describing the font followed by the
unmodified TrueType data. Header fields are read back from the TrueType
tables with fonttools.
"""

import struct
from io import BytesIO

from fontTools.ttLib import TTFont

EOT_VERSION = 0x00020001
MAGIC_NUMBER = 0x504C
DEFAULT_CHARSET = 0x01

# Name IDs stored in the header, in header order
NAME_ID_FAMILY = 1
NAME_ID_STYLE = 2
NAME_ID_VERSION = 5
NAME_ID_FULL_NAME = 4
HEADER_NAME_IDS = (NAME_ID_FAMILY, NAME_ID_STYLE, NAME_ID_VERSION, NAME_ID_FULL_NAME)

PANOSE_FIELDS = (
    "bFamilyType",
    "bSerifStyle",
    "bWeight",
    "bProportion",
    "bContrast",
    "bStrokeVariation",
    "bArmStyle",
    "bLetterForm",
    "bMidline",
    "bXHeight",
)


def _name_record(font: TTFont, name_id: int) -> bytes:
    """Name table string as UTF-16LE, empty when absent."""
    value = font["name"].getDebugName(name_id) or ""
    return value.encode("utf-16-le")


def ttf_to_eot(ttf: bytes) -> bytes:
    """Wrap TrueType data in an EOT header.

    Args:
        ttf: Complete TrueType font file

    Returns:
        EOT file contents
    """
    font = TTFont(BytesIO(ttf))
    try:
        os2 = font["OS/2"]
        head = font["head"]

        header = bytearray()
        # EOTSize is patched in once the header length is known
        header += struct.pack("<4L", 0, len(ttf), EOT_VERSION, 0)
        header += bytes(getattr(os2.panose, field) for field in PANOSE_FIELDS)
        header += struct.pack(
            "<BBLHH",
            DEFAULT_CHARSET,
            os2.fsSelection & 0x01,
            os2.usWeightClass,
            os2.fsType,
            MAGIC_NUMBER,
        )
        header += struct.pack(
            "<4L",
            os2.ulUnicodeRange1,
            os2.ulUnicodeRange2,
            os2.ulUnicodeRange3,
            os2.ulUnicodeRange4,
        )
        header += struct.pack(
            "<2L",
            getattr(os2, "ulCodePageRange1", 0),
            getattr(os2, "ulCodePageRange2", 0),
        )
        header += struct.pack("<L", head.checkSumAdjustment)
        header += struct.pack("<4L", 0, 0, 0, 0)
        header += struct.pack("<H", 0)

        for name_id in HEADER_NAME_IDS:
            record = _name_record(font, name_id)
            header += struct.pack("<H", len(record))
            header += record
            header += struct.pack("<H", 0)

        # Empty root string
        header += struct.pack("<H", 0)
    finally:
        font.close()

    struct.pack_into("<L", header, 0, len(header) + len(ttf))
    return bytes(header) + ttf


def read_eot_header(eot: bytes) -> dict[str, int]:
    """Read the fixed-size leading fields of an EOT header.

    Returns:
        Mapping with ``eot_size``, ``font_data_size``, ``version``,
        ``flags`` and ``magic_number``
    """
    eot_size, font_data_size, version, flags = struct.unpack_from("<4L", eot, 0)
    (magic_number,) = struct.unpack_from("<H", eot, 34)
    return {
        "eot_size": eot_size,
        "font_data_size": font_data_size,
        "version": version,
        "flags": flags,
        "magic_number": magic_number,
    }
