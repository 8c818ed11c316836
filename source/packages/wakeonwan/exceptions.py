"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised while setting up or sending wake
               on lan packets.

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

from typing import Any, Optional


class WakeOnWanError(RuntimeError):
    """
        The base error for errors raised by the wakeonwan package.
    """

class SetupError(WakeOnWanError):
    """
        This error is raised when a run cannot be started, before any magic packet
        has been sent.  The `step` attribute names the setup step that failed.
    """
    step = "setup"

class HostnameError(SetupError):
    """
        This error is raised when a destination URI does not contain a hostname.
    """
    step = "hostname extraction"

class ResolutionError(SetupError):
    """
        This error is raised when a hostname cannot be resolved to a socket address.
    """
    step = "resolution"

class BindError(SetupError):
    """
        This error is raised when the transmit socket cannot be bound to the wildcard address.
    """
    step = "bind"

class SocketConfigError(SetupError):
    """
        This error is raised when the platform rejects enabling broadcast on the transmit socket.
    """
    step = "broadcast config"

class SendError(WakeOnWanError):
    """
        Records the failure to send a magic packet for a single hardware address.  These are
        collected and returned by the sender instead of being raised, a failed send never
        stops the remaining sends.
    """
    def __init__(self, message: str, hwaddr: bytes, destination: Any, cause: Optional[OSError] = None, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.hwaddr = hwaddr
        self.destination = destination
        self.cause = cause
        return

class HardwareAddressError(ValueError):
    """
        This error is raised when a hardware address literal cannot be parsed.
    """
