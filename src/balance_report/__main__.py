import sys

from balance_report.main import main

sys.exit(main())
