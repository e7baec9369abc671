"""
Allow running the package directly: python -m mandelview
Or from inside the folder: python __main__.py
"""
import sys
import os

# Handle both direct execution and module execution
if __name__ == "__main__" and not __package__:
    # When run directly, add parent directory to path for imports
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    from mandelview.app import main
else:
    from .app import main

if __name__ == "__main__":
    main()
