import sys

from generes.generes import main

sys.exit(main())
