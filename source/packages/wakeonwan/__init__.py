"""
.. module:: wakeonwan
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: The wakeonwan package contains the modules for building and sending Wake-on-LAN
               magic packets to local or remote networks.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "0.1.1"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"
