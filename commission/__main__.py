import sys

from commission.cli import main


sys.exit(main())
