from cssbuilder.errors import SelectorParseError
from cssbuilder.parser.transformer import combine_compounds, parse_selector, split_selector

__all__ = ["SelectorParseError", "combine_compounds", "parse_selector", "split_selector"]
