import sys

from autocorrect.cli import main

sys.exit(main())
