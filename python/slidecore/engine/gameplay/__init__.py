from slidecore.engine.gameplay.game import BoardSnapshot, GamePlay, MoveResult, SolvedEvent

__all__ = ["BoardSnapshot", "GamePlay", "MoveResult", "SolvedEvent"]
