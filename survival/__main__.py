import sys

from survival.main import main

sys.exit(main())
