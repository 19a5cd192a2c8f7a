from oats.repl import main
import sys

sys.exit(main())
