import sys

from field_suggest.cli import main


sys.exit(main())
