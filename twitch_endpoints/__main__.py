import sys

from twitch_endpoints.cli import main

sys.exit(main())
