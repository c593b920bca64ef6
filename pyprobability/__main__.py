import sys

from pyprobability.cli import main

sys.exit(main())
