from .merge import clone, merge

__all__ = ["clone", "merge"]
