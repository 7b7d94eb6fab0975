import sys

from verbi.main import main

sys.exit(main())
