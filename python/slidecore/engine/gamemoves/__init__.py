from slidecore.engine.gamemoves.moves import (
    apply_move,
    is_legal,
    legal_targets,
    slide,
    target_for,
)

__all__ = ["apply_move", "is_legal", "legal_targets", "slide", "target_for"]
