import sys

from clickup_export.cli import main

sys.exit(main())
