# Runner for the leafwalker command line without installing the package
import sys

from leafwalker_lib.cli import main

if __name__ == "__main__":
    sys.exit(main())
