import sys

from order_pipeline.entrypoints.cli import main

sys.exit(main())
