# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
