"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of Qt or of any drawing surface.
It deals with layout math, fill states and habit data.
"""
