"""
A calculator for arbitrarily large integers, with named variables.

The engine is in `calculator.execute`; the console shell is in `cmdline`.
"""
