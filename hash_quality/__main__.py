import sys

from hash_quality.main import main

sys.exit(main())
