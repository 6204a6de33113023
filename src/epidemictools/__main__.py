import sys

from epidemictools.cli import main

sys.exit(main())
