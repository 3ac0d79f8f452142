"""Entry point for running the ADF bridge command line."""

from adf_bridge import main

if __name__ == "__main__":
    main()
