import sys

from figma_assets.exporter import main

if __name__ == "__main__":
    sys.exit(main())
