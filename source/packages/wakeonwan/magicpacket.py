"""
.. module:: magicpacket
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that contains the wake on lan magic packet builder.

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

from wakeonwan.hwaddress import HWADDR_LENGTH

SYNC_STREAM = b"\xff" * 6
HWADDR_REPEAT_COUNT = 16

MAGIC_PACKET_LENGTH = len(SYNC_STREAM) + (HWADDR_LENGTH * HWADDR_REPEAT_COUNT)


def build_magic_packet(hwaddr: bytes) -> bytes:
    '[FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )'

    if len(hwaddr) != HWADDR_LENGTH:
        errmsg = f"The hardware address must be exactly {HWADDR_LENGTH} bytes. len={len(hwaddr)}"
        raise ValueError(errmsg)

    packet = SYNC_STREAM + bytes(hwaddr) * HWADDR_REPEAT_COUNT

    return packet
