import sys

from pulse_logger.app.runner import main

sys.exit(main())
