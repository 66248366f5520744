import sys

from chipvm.main import main

sys.exit(main())
