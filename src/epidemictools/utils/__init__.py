from .reachability import reachable_mask, can_saturate

__all__ = [
    "reachable_mask",
    "can_saturate",
]
