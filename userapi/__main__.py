"""Allow ``python -m userapi``."""

from userapi.cli import main

main()
