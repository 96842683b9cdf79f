"""cssbuilder - fluent CSS selector builder."""

__version__ = "0.1.0"

from cssbuilder.builder import Renderable, SelectorBuilder  # noqa: E402
from cssbuilder.combinator import Combinator, SelectorCombinator  # noqa: E402
from cssbuilder.errors import (  # noqa: E402
    DuplicateFragmentError,
    OutOfOrderError,
    SelectorError,
    SelectorParseError,
)
from cssbuilder.facade import (  # noqa: E402
    attr,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from cssbuilder.model.kinds import FragmentKind  # noqa: E402
from cssbuilder.parser import parse_selector, split_selector  # noqa: E402
from cssbuilder.serialization import from_json, to_json  # noqa: E402
from cssbuilder.shapes import Rectangle  # noqa: E402

__all__ = [
    "__version__",
    "Combinator",
    "DuplicateFragmentError",
    "FragmentKind",
    "OutOfOrderError",
    "Rectangle",
    "Renderable",
    "SelectorBuilder",
    "SelectorCombinator",
    "SelectorError",
    "SelectorParseError",
    "attr",
    "class_",
    "combine",
    "element",
    "from_json",
    "id",
    "parse_selector",
    "pseudo_class",
    "pseudo_element",
    "split_selector",
    "to_json",
]
