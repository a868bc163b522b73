from scoped_css.transforms.base import Transform
from scoped_css.transforms.mangle import MangleResult, mangle
from scoped_css.transforms.selector_scope import (
    PrefixSelectorTransform,
    prefix_selector,
    scope_selector,
)

__all__ = [
    "MangleResult",
    "PrefixSelectorTransform",
    "Transform",
    "apply_transforms",
    "mangle",
    "prefix_selector",
    "scope_selector",
]


def apply_transforms(selector, transforms):
    """Apply each transform in *transforms* to *selector*, in order."""
    for t in transforms:
        selector = t.apply(selector)
    return selector
