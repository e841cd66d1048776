import sys

from habitrings.app.main import main

sys.exit(main())
