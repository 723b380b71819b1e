"""Allow running the downloader with ``python -m loom_downloader``."""

from loom_downloader.cli.main import main

if __name__ == "__main__":
    main()
