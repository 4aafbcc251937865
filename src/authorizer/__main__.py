import sys

from authorizer.main import main

sys.exit(main())
