"""
Change Gears CLI - Command-line interfaces.

Commands:
    changegears    Search change gear trains for a thread pitch
"""
