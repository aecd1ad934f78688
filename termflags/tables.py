"""Flag tables for the four terminal mode fields and the baud rate field.

Which symbols exist depends on the platform, so each table is assembled
from a list of candidate names filtered against the termios module.
"""

import logging
import termios
from functools import cache
from typing import Any

from .types import Field, FlagEntry, FlagTable, SpeedTable

logger = logging.getLogger(__name__)

INPUT_FLAGS = [
    "BRKINT",
    "ICRNL",
    "IGNBRK",
    "IGNCR",
    "IGNPAR",
    "IMAXBEL",
    "INLCR",
    "INPCK",
    "ISTRIP",
    "IUCLC",
    "IUTF8",
    "IXANY",
    "IXOFF",
    "IXON",
    "PARMRK",
]

# Delay fields are multi-bit; only the single-bit variants are listed
OUTPUT_FLAGS = [
    "BS1",
    "CR1",
    "CR2",
    "FF1",
    "NL1",
    "OCRNL",
    "OFDEL",
    "OFILL",
    "OLCUC",
    "ONLCR",
    "ONLRET",
    "ONOCR",
    "ONOEOT",
    "OPOST",
    "OXTABS",
    "VT1",
]

CONTROL_FLAGS = [
    "CLOCAL",
    "CMSPAR",
    "CREAD",
    "CRTSCTS",
    "CSIZE",
    "CSTOPB",
    "HUPCL",
    "PARENB",
    "PARODD",
]

LOCAL_FLAGS = [
    "ECHO",
    "ECHOCTL",
    "ECHOE",
    "ECHOK",
    "ECHOKE",
    "ECHONL",
    "ECHOPRT",
    "EXTPROC",
    "FLUSHO",
    "ICANON",
    "IEXTEN",
    "ISIG",
    "NOFLSH",
    "PENDIN",
    "TOSTOP",
    "XCASE",
]

SPEEDS = [
    "B0",
    "B50",
    "B75",
    "B110",
    "B134",
    "B150",
    "B200",
    "B300",
    "B600",
    "B1200",
    "B1800",
    "B2400",
    "B4800",
    "B7200",
    "B9600",
    "B14400",
    "B19200",
    "B28800",
    "B38400",
    "B57600",
    "B76800",
    "B115200",
    "B230400",
    "B460800",
    "B500000",
    "B576000",
    "B921600",
    "B1000000",
    "B1152000",
    "B1500000",
    "B2000000",
    "B2500000",
    "B3000000",
    "B3500000",
    "B4000000",
    "EXTA",
    "EXTB",
]

CANDIDATES: dict[Field, list[str]] = {
    Field.IFLAG: INPUT_FLAGS,
    Field.OFLAG: OUTPUT_FLAGS,
    Field.CFLAG: CONTROL_FLAGS,
    Field.LFLAG: LOCAL_FLAGS,
}


def available(names: list[str], source: Any = termios) -> list[FlagEntry]:
    """Return entries for the names that source defines as integers."""
    entries = []
    for name in names:
        value = getattr(source, name, None)
        if isinstance(value, int):
            entries.append(FlagEntry(name, value))
    return entries


def build_table(field: Field, names: list[str], source: Any = termios) -> FlagTable:
    """Build a sorted table from the subset of names the platform defines."""
    table = FlagTable(field, tuple(available(names, source)))
    logger.debug("%s: %d of %d flags defined", field, len(table), len(names))
    return table


def build_speed_table(names: list[str] = SPEEDS, source: Any = termios) -> SpeedTable:
    """Build the baud rate table from the subset of names the platform defines."""
    table = SpeedTable(Field.ISPEED, tuple(available(names, source)))
    logger.debug("speeds: %d of %d rates defined", len(table), len(names))
    return table


@cache
def mode_table(field: Field) -> FlagTable:
    """Return the process-wide table for one of the four mode fields."""
    if field not in CANDIDATES:
        raise KeyError(f"{field} is not a mode field")
    return build_table(field, CANDIDATES[field])


def input_modes() -> FlagTable:
    return mode_table(Field.IFLAG)


def output_modes() -> FlagTable:
    return mode_table(Field.OFLAG)


def control_modes() -> FlagTable:
    return mode_table(Field.CFLAG)


def local_modes() -> FlagTable:
    return mode_table(Field.LFLAG)


@cache
def speeds() -> SpeedTable:
    """Return the process-wide baud rate table."""
    return build_speed_table()


def speed_mask(source: Any = termios) -> int:
    """Return the c_cflag bits holding the baud rate, or 0 if speeds live elsewhere."""
    return getattr(source, "CBAUD", 0)
