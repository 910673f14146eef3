#!/usr/bin/env python3
"""govm entry point"""

from govm.cli import main

if __name__ == "__main__":
    main()
