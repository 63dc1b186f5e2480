"""
Run with:

    py -m xinter [script] [-c] [-d] [-i] [-v]

Try `py -m xinter -h` for what the arguments mean.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from xinter.cmdline import main

exit(main())
