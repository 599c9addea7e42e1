import sys

from snail_init.cli import main

sys.exit(main())
