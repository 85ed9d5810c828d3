import sys

from irongen.cli import main

sys.exit(main())
