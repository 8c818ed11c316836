"""
.. module:: sender
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for creating the transmit socket and sending wake on
               lan magic packets.

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

from typing import Iterable, List

import logging
import socket

from wakeonwan.constants import IPV4_WILDCARD_ADDR, IPV6_WILDCARD_ADDR
from wakeonwan.exceptions import BindError, SendError, SocketConfigError
from wakeonwan.hwaddress import format_hardware_address
from wakeonwan.magicpacket import build_magic_packet
from wakeonwan.resolution import Destination

logger = logging.getLogger()


def open_transmit_socket(destination: Destination) -> socket.socket:
    """
        Create an unconnected UDP socket for sending magic packets to the specified destination.
        The socket is bound to the wildcard address of the destination's address family on an
        ephemeral port.  Broadcast is enabled for IPv4 destinations, IPv6 has no broadcast.

        :param destination: The destination the socket will send magic packets to.

        :returns: The bound transmit socket.

        :raises BindError: If the socket cannot be created or bound.
        :raises SocketConfigError: If the platform rejects enabling broadcast.
    """

    bind_addr = None
    sock = None

    if destination.family == socket.AF_INET:
        bind_addr = (IPV4_WILDCARD_ADDR, 0)
    elif destination.family == socket.AF_INET6:
        bind_addr = (IPV6_WILDCARD_ADDR, 0)
    else:
        raise BindError(f"Socket family not supported. family={destination.family!r}") from None

    try:
        sock = socket.socket(destination.family, socket.SOCK_DGRAM)
        sock.bind(bind_addr)
    except OSError as os_err:
        if sock is not None:
            sock.close()
        errmsg = f"Unable to bind transmit socket to {bind_addr[0]}. {os_err}"
        raise BindError(errmsg) from os_err

    logger.debug("Bound to %s", sock.getsockname())

    if destination.family == socket.AF_INET:
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError as os_err:
            sock.close()
            errmsg = f"Failed to enable broadcast: {os_err}"
            raise SocketConfigError(errmsg) from os_err

    return sock


def send_magic_packets(sock: socket.socket, destination: Destination, hwaddrs: Iterable[bytes], dry_run: bool = False) -> List[SendError]:
    """
        Sends a magic packet to the destination for each of the hardware addresses, in the
        order they were given.  Each send attempt is logged and a failure to send is logged
        and does not stop the sends for the hardware addresses that follow.

        :param sock: The transmit socket created with :func:`open_transmit_socket`.
        :param destination: The destination to send the magic packets to.
        :param hwaddrs: The 6 byte hardware addresses of the devices to wake.
        :param dry_run: When True the packets are built and reported but not sent.

        :returns: A list with a :class:`SendError` for each hardware address whose packet could
                  not be sent.
    """
    failures = []

    for hwaddr in hwaddrs:
        hwaddr_str = format_hardware_address(hwaddr)

        packet = build_magic_packet(hwaddr)

        if dry_run:
            logger.info("Sending magic packet to %s at %s (dry run)", hwaddr_str, destination)
            continue

        logger.info("Sending magic packet to %s at %s", hwaddr_str, destination)

        try:
            sock.sendto(packet, destination.sockaddr)
        except OSError as os_err:
            errmsg = f"Can't send magic packet to {hwaddr_str} on {destination}, {os_err}"
            logger.error(errmsg)
            failures.append(SendError(errmsg, hwaddr, destination, cause=os_err))

    return failures
