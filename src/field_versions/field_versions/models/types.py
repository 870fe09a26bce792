# ABOUTME: Fixed-width integer type aliases for versioned fields
# ABOUTME: Lets current and legacy wire types express unsigned ranges that plain int cannot

from typing import Annotated, get_origin

from annotated_types import Interval

U32 = Annotated[int, Interval(ge=0, le=2**32 - 1)]
U64 = Annotated[int, Interval(ge=0, le=2**64 - 1)]
U128 = Annotated[int, Interval(ge=0, le=2**128 - 1)]


def type_name(target: object) -> str:
    """Readable name for a wire type, used in logs and error details."""
    if isinstance(target, type) and get_origin(target) is None:
        return target.__qualname__
    return repr(target).replace("typing.", "")
