import sys

from snippetbox.cli import main

sys.exit(main())
