import sys

from beancount_shorthand.presentation.cli.main import cli

sys.exit(cli())
