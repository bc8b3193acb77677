from schemer.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
