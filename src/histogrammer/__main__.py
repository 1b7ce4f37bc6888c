"""Allow ``python -m histogrammer``."""

from histogrammer.interfaces.cli import main

if __name__ == "__main__":
    main()
