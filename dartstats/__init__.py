"""
Dart statistics engine: per-game checkout and average statistics, saved game
summaries, cross-game player rankings and month history.
"""
__version__ = "0.1.0"
