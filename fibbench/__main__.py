import sys

from fibbench.cli import main

sys.exit(main())
