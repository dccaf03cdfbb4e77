# run.py
#
# Same as the installed `queuesim` command:
#   echo "1 3 5 13 2 1 4 10" | python run.py
#   python run.py 1 3 5 13 2 1 4 10 --summary --delay 0.2

import sys

from queuesim.cli import main

if __name__ == "__main__":
    sys.exit(main())
