import sys

from carlae.repl import main

if __name__ == "__main__":
    sys.exit(main())
