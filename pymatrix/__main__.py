import sys

from pymatrix.console.cli import main

sys.exit(main())
