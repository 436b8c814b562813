import sys

from wordle.script import main

sys.exit(main())
