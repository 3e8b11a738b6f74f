"""Command-line interface."""
from matrixcache.main import main

if __name__ == "__main__":
    main()
