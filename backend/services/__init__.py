"""
Terminal-facing services: the curses session and the renderer.
"""
