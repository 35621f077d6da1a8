import sys

from batch_scraper.cli import main

sys.exit(main())
