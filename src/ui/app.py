"""
Minesweeper application startup
Prompts for the board dimensions, builds the board and runs the window
"""

import sys
from typing import Callable, Optional, Tuple

from game import GameBoard, InvalidConfigurationError


EXIT_OK = 0
EXIT_RESOURCE_ERROR = 1
EXIT_CONFIG_ERROR = 2


def prompt_int(prompt: str, input_func: Callable[[str], str] = input) -> int:
    """Ask until the answer parses as a whole number"""
    while True:
        answer = input_func(prompt).strip()
        try:
            return int(answer)
        except ValueError:
            print(f"'{answer}' is not a whole number, try again.")


def prompt_configuration(input_func: Callable[[str], str] = input) -> Tuple[int, int, int]:
    """Ask for grid width, grid height and bomb count"""
    width = prompt_int("Enter grid width: ", input_func)
    height = prompt_int("Enter grid height: ", input_func)
    bombs = prompt_int("Enter bomb count: ", input_func)
    return width, height, bombs


def main(input_func: Optional[Callable[[str], str]] = None) -> int:
    """Main entry point for the minesweeper game, returns the process exit code"""
    try:
        width, height, bombs = prompt_configuration(input_func or input)
    except (EOFError, KeyboardInterrupt):
        print("\nGame interrupted by user")
        return EXIT_OK

    try:
        board = GameBoard(width, height, bombs)
    except InvalidConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        from ui.gui import MinesweeperGUI, ResourceInitError
    except ImportError as e:
        print(f"Failed to initialize the display: {e}", file=sys.stderr)
        return EXIT_RESOURCE_ERROR

    try:
        gui = MinesweeperGUI(board)
    except ResourceInitError as e:
        print(f"Failed to initialize the display: {e}", file=sys.stderr)
        return EXIT_RESOURCE_ERROR

    print(f"New game: {width}x{height} with {bombs} bombs")
    try:
        gui.run()
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
    return EXIT_OK
