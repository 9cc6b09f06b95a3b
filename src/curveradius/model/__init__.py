"""
The MODEL layer contains pure data structures and the radius formula.
It has NO knowledge of the GUI (Qt).
"""
