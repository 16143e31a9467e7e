from slidecore.engine.gamestate.state import GameState, Ticker

__all__ = ["GameState", "Ticker"]
