import sys

from hdr.cli import main

sys.exit(main())
