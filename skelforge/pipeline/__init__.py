from .context import SkeletonContext

__all__ = ["SkeletonContext"]
