import sys

from sweather.cli import main

sys.exit(main())
