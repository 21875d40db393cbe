"""Allow running the CLI with: python -m eisenhower"""

from .cli.main import main

main()
