"""
UI package for the minesweeper window and startup prompts
"""
