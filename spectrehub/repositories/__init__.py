from spectrehub.repositories.base import RunStorage
from spectrehub.repositories.runs import LocalRunStorage

__all__ = ["LocalRunStorage", "RunStorage"]
