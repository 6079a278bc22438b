"""Allow ``python -m command_history``."""

from command_history.cli.app import main

main()
