import sys

from postergen_client.main import main

sys.exit(main())
