"""Shared repository types."""

from typing import List, Optional, TypeVar, Union

T = TypeVar("T")

# Result of a find: None for no rows, the record itself for exactly one row,
# and a list in storage order for more than one.
Found = Optional[Union[T, List[T]]]
