import sys

from termjack.cli import main

sys.exit(main())
