import sys

from minipas.cli import main

sys.exit(main())
