"""
Minesweeper Game - Main Entry Point
Single player minesweeper with a limited number of hints
"""

import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from ui.app import main


if __name__ == "__main__":
    sys.exit(main())
