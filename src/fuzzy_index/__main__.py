"""Allow ``python -m fuzzy_index``."""

from fuzzy_index.cli.app import main

main()
