"""Allow running ConfigScout as ``python -m configscout``."""

from configscout.api.cli.main import main

if __name__ == "__main__":
    main()
