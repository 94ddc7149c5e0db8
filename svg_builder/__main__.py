import sys

from svg_builder.main import main

sys.exit(main())
