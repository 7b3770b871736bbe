"""ICU message pattern syntax package.

Provides the pattern tokenizer, argument tokens and type inference.
Separate from merging so that tooling (linters, editors) can tokenize
single patterns without loading resource trees.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult
from .tokenizer import PatternTokenizer, tokenize, try_tokenize
from .tokens import NamedToken, NumberedToken, Token, token_kind
from .types import combine_types, infer_argument_type, temporal_type_from_fields

__all__ = [
    "Cursor",
    "NamedToken",
    "NumberedToken",
    "ParseResult",
    "PatternTokenizer",
    "Token",
    "combine_types",
    "infer_argument_type",
    "temporal_type_from_fields",
    "token_kind",
    "tokenize",
    "try_tokenize",
]
