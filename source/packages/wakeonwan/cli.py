"""
.. module:: cli
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: The command line interface for sending Wake-on-LAN packets over a network.

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

from typing import List, Optional

import argparse
import logging
import os
import sys

import wakeonwan

from wakeonwan.constants import DEFAULT_HOST, DEFAULT_PORT, LOG_LEVEL_ENVIRONMENT_VARIABLE
from wakeonwan.exceptions import HardwareAddressError, SetupError
from wakeonwan.hwaddress import parse_hardware_address
from wakeonwan.resolution import extract_hostname, resolve_destination
from wakeonwan.sender import open_transmit_socket, send_magic_packets

EXIT_SUCCESS = 0
EXIT_SETUP_ERROR = 1
EXIT_SEND_FAILURE = 2

logger = logging.getLogger()


def hardware_address_arg(value: str) -> bytes:
    try:
        hwaddr = parse_hardware_address(value)
    except HardwareAddressError as hwerr:
        raise argparse.ArgumentTypeError(str(hwerr)) from hwerr
    return hwaddr


def port_arg(value: str) -> int:
    try:
        port = int(value, base=10)
    except ValueError as verr:
        raise argparse.ArgumentTypeError(f"Invalid port number. port={value!r}") from verr

    if port < 0 or port > 65535:
        raise argparse.ArgumentTypeError(f"The port must be between 0 and 65535. port={port}")

    return port


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wakeonwan", description="Send Wake-On-LAN packets over a network.")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {wakeonwan.__version__}")
    parser.add_argument("-i", "--uri", dest="host", default=DEFAULT_HOST,
        help=f"Destination uri (default: {DEFAULT_HOST})")
    parser.add_argument("-p", "--port", type=port_arg, default=DEFAULT_PORT,
        help=f"Destination port (default: {DEFAULT_PORT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-D", "--dry-run", dest="dry_run", action="store_true",
        help="Do not actually send the packet (dry-run)")
    parser.add_argument("--strict", action="store_true",
        help=f"Exit with status {EXIT_SEND_FAILURE} when a magic packet could not be sent")
    parser.add_argument("mac", nargs="+", type=hardware_address_arg, help="MAC address(es) to wake.")
    return parser


def configure_logging(verbose: bool):
    """
        Configures the root logger.  The verbose flag selects DEBUG, otherwise the level is taken
        from the WAKEONWAN_LOG_LEVEL environment variable and defaults to WARNING.
    """
    level = logging.WARNING

    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get(LOG_LEVEL_ENVIRONMENT_VARIABLE, "").strip().upper()
        if level_name != "":
            level_value = logging.getLevelName(level_name)
            if isinstance(level_value, int):
                level = level_value

    logging.basicConfig(level=level, format="%(levelname)s %(message)s", stream=sys.stderr)

    return


def main(argv: Optional[List[str]] = None) -> int:

    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        host = extract_hostname(args.host)
        logger.debug("Resolved uri %s to hostname %s", args.host, host)

        destination = resolve_destination(host, args.port)

        sock = open_transmit_socket(destination)
    except SetupError as serr:
        logger.error("Setup failed during %s. %s", serr.step, serr)
        return EXIT_SETUP_ERROR

    with sock:
        failures = send_magic_packets(sock, destination, args.mac, dry_run=args.dry_run)

    if args.strict and len(failures) > 0:
        return EXIT_SEND_FAILURE

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
