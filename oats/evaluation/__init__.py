from oats.evaluation.evaluator import evaluate, evaluate_to_value
from oats.evaluation.apply import apply

__all__ = ["evaluate", "evaluate_to_value", "apply"]
