"""Domain services package."""

from .patching import PatchOperation, apply_patch, apply_patch_to_model

__all__ = ["PatchOperation", "apply_patch", "apply_patch_to_model"]
