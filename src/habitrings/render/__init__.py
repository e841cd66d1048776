"""
The RENDER layer turns geometry and fill states into draw calls on a Surface.
"""
