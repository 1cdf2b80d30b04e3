import sys

from wordint.cli import cli_main

sys.exit(cli_main())
