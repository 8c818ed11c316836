"""
.. module:: hwaddress
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for parsing and formatting hardware (MAC) addresses.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"

import re

from wakeonwan.exceptions import HardwareAddressError

HWADDR_LENGTH = 6

REGEX_HWADDR_COLON = re.compile(r"^([0-9A-Fa-f]{2})(?::([0-9A-Fa-f]{2})){5}$")
REGEX_HWADDR_HYPHEN = re.compile(r"^([0-9A-Fa-f]{2})(?:-([0-9A-Fa-f]{2})){5}$")
REGEX_HWADDR_DOTTED = re.compile(r"^([0-9A-Fa-f]{4})\.([0-9A-Fa-f]{4})\.([0-9A-Fa-f]{4})$")


def parse_hardware_address(candidate: str) -> bytes:
    """
        Parses a hardware address literal into its 6 byte form.

        :param candidate: The address in colon separated ('00:11:22:33:44:55'), hyphen separated
                          ('00-11-22-33-44-55') or dotted ('0011.2233.4455') notation.

        :returns: The 6 bytes of the hardware address.

        :raises HardwareAddressError: If the candidate is not a hardware address literal.
    """
    candidate = candidate.strip()

    hexdigits = None
    if REGEX_HWADDR_COLON.match(candidate) is not None:
        hexdigits = candidate.replace(":", "")
    elif REGEX_HWADDR_HYPHEN.match(candidate) is not None:
        hexdigits = candidate.replace("-", "")
    elif REGEX_HWADDR_DOTTED.match(candidate) is not None:
        hexdigits = candidate.replace(".", "")
    else:
        errmsg = f"Invalid hardware address. addr={candidate!r}"
        raise HardwareAddressError(errmsg)

    hwaddr = bytes.fromhex(hexdigits)

    return hwaddr


def format_hardware_address(hwaddr: bytes) -> str:
    """
        Formats a 6 byte hardware address as upper case, colon separated octets.
    """
    if len(hwaddr) != HWADDR_LENGTH:
        errmsg = f"A hardware address must be {HWADDR_LENGTH} bytes long. len={len(hwaddr)}"
        raise HardwareAddressError(errmsg)

    hwaddr_str = ":".join(["%02X" % octet for octet in hwaddr])

    return hwaddr_str
