"""
.. module:: resolution
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for resolving the destination of wake on lan packets.

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

from typing import NamedTuple, Tuple

import ipaddress
import logging
import socket

from urllib.parse import urlsplit

from wakeonwan.exceptions import HostnameError, ResolutionError

logger = logging.getLogger()


class Destination(NamedTuple):
    """
        The resolved destination that every magic packet of a run is sent to.
    """
    family: socket.AddressFamily
    address: str
    port: int
    sockaddr: Tuple

    @property
    def is_ipv4(self) -> bool:
        return self.family == socket.AF_INET

    @property
    def scoped_address(self) -> str:
        """
            The address including the IPv6 zone when the socket address carries a scope id.
        """
        address = self.address

        if self.family == socket.AF_INET6 and len(self.sockaddr) > 3 and self.sockaddr[3] != 0 and "%" not in address:
            scope_id = self.sockaddr[3]
            try:
                zone = socket.if_indextoname(scope_id)
            except (OSError, AttributeError):
                zone = str(scope_id)
            address = f"{address}%{zone}"

        return address

    def __str__(self) -> str:
        if self.family == socket.AF_INET6:
            return f"[{self.scoped_address}]:{self.port}"
        return f"{self.address}:{self.port}"


def is_ip_literal(candidate: str) -> bool:
    """
        Checks to see if 'candidate' is an IPv4 or IPv6 address literal.  Brackets and an
        IPv6 zone ('%eth0') are ignored.

        :param candidate: A string that is to be checked to see if it is an IP address.

        :returns: A boolean indicating if the candidate is an IP address literal
    """
    is_literal = True

    literal = strip_brackets(candidate).partition("%")[0]
    try:
        ipaddress.ip_address(literal)
    except ValueError:
        is_literal = False

    return is_literal


def strip_brackets(host: str) -> str:
    """
        Strips the square brackets from an IPv6 literal in URI notation, '[::1]' becomes '::1'.
    """
    host_clean = host

    if host_clean.startswith("["):
        host_clean = host_clean[1:]
    if host_clean.endswith("]"):
        host_clean = host_clean[:-1]

    return host_clean


def extract_hostname(uri: str) -> str:
    """
        Extracts the hostname from a destination URI.  The URI can be a bare IP address,
        a bracketed IPv6 address, a 'host[:port]' authority or a full URI such as
        'udp://host:port/'.  Any port in the URI is ignored.

        :param uri: The destination URI to extract the hostname from.

        :returns: The hostname or IP address literal found in the URI.

        :raises HostnameError: If the URI does not have a hostname.
    """
    candidate = uri.strip()

    if candidate == "":
        raise HostnameError("The destination uri is empty and has no hostname.")

    # IP literals are not valid URI authorities when unbracketed, so handle them first
    if is_ip_literal(candidate):
        return candidate

    if "://" not in candidate:
        # An unbracketed authority has at most one ':' before the port, anything else
        # is a malformed IPv6 literal that urlsplit would truncate at the first ':'
        if not candidate.startswith("[") and candidate.count(":") > 1:
            errmsg = f"Uri {uri} is not a valid IP address and has no hostname!"
            raise HostnameError(errmsg)
        candidate = "//" + candidate

    try:
        hostname = urlsplit(candidate).hostname
    except ValueError as verr:
        errmsg = f"Uri {uri} has no hostname!"
        raise HostnameError(errmsg) from verr

    if not hostname:
        errmsg = f"Uri {uri} has no hostname!"
        raise HostnameError(errmsg)

    return hostname


def resolve_destination(host: str, port: int) -> Destination:
    """
        Resolves a hostname or IP address to the destination socket address.  Both IPv4 and
        IPv6 addresses are accepted, with or without brackets, and hostnames are resolved
        with DNS.  When the lookup yields more than one address the first one is used.

        :param host: The hostname or IP address to resolve.
        :param port: The UDP port of the destination.

        :returns: The resolved :class:`Destination`.

        :raises ResolutionError: If the lookup fails or does not yield any addresses.
    """
    host_clean = strip_brackets(host)

    try:
        addr_infos = socket.getaddrinfo(host_clean, port, type=socket.SOCK_DGRAM)
    except (OSError, UnicodeError, OverflowError) as err:
        errmsg = f"Resolving {host} failed. {err}"
        raise ResolutionError(errmsg) from err

    if len(addr_infos) == 0:
        errmsg = f"No addresses found for {host}"
        raise ResolutionError(errmsg)

    family, _, _, _, sockaddr = addr_infos[0]

    destination = Destination(family, sockaddr[0], sockaddr[1], sockaddr)
    logger.debug("Resolved hostname %s to ip %s", host, destination.address)

    return destination
