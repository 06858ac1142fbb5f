# ride_share/__main__.py
import sys

from ride_share.app.demo import main

sys.exit(main())
