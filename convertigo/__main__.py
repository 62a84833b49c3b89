import sys

from convertigo.cli import main

sys.exit(main())
