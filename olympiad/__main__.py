"""Allow `python -m olympiad`."""
from olympiad.cli.main import main

main()
