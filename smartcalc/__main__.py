"""
Lets `python -m smartcalc` start the calculator.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from smartcalc.cmdline import main

main()
