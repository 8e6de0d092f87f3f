"""Allow ``python -m taskboard``."""

from taskboard.interfaces.cli.main import main

main()
