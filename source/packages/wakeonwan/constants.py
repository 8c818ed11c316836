"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the constants shared by the wakeonwan modules.

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


DEFAULT_HOST = "255.255.255.255"
DEFAULT_PORT = 9

IPV4_WILDCARD_ADDR = "0.0.0.0"
IPV6_WILDCARD_ADDR = "::"

LOG_LEVEL_ENVIRONMENT_VARIABLE = "WAKEONWAN_LOG_LEVEL"
