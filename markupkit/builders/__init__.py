# Tag builders: attribute accumulation and serialization for one element

from .tag import TagBuilder, encode_data_option
from .button import ButtonBuilder

__all__ = [
    "TagBuilder",
    "ButtonBuilder",
    "encode_data_option",
]
