import sys

from icons_toolkit.cli import main

sys.exit(main())
