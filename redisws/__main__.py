import sys

from redisws.cli import main

sys.exit(main())
