"""
The MODEL layer contains pure data structures and the field formulas.
It has NO knowledge of the console output; printing lives in ``fieldcalc.main``.
"""
