import sys

from alias_miner.workflow.cli import main

sys.exit(main())
