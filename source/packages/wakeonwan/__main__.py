"""
.. module:: __main__
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Allows the command line interface to be run with 'python -m wakeonwan'.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

import sys

from wakeonwan.cli import main

sys.exit(main())
