from .greedy import GreedySolver, pick_guess

__all__ = ["GreedySolver", "pick_guess"]
