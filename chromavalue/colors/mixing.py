from ..errors import MixAmountError
from ..conversions.numbers import round_half_up
from ..types.component_types import MIX_EPSILON

def check_amount(amount: float) -> float:
    """Raise ``MixAmountError`` unless ``amount`` is a number in [0, 1]."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or not 0.0 <= amount <= 1.0:
        raise MixAmountError(amount)
    return amount

def is_mix_small(amount: float) -> bool:
    return amount <= MIX_EPSILON

def is_mix_large(amount: float) -> bool:
    return amount >= 1.0 - MIX_EPSILON

def mix_channel(start: int, end: int, amount: float) -> int:
    """
    Move ``start`` toward ``end`` by ``amount`` of their signed difference.

    The scaled difference is rounded half-up, so mixing 0 toward 255 by 0.5
    gives 128.
    """
    difference = end - start
    if difference == 0:
        return start
    return start + round_half_up(difference * amount)
