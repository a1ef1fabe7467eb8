import sys

from cc_license.infrastructure.cli.license_cli import main

sys.exit(main())
