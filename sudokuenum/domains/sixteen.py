from . import Digit, Domain, register_domain

# Symbols run 1-9 then A-G.
SixteenDigit = Digit("SixteenDigit", [(f"D{rank}", rank) for rank in range(1, 17)], module=__name__)


@register_domain
class Sixteen(Domain):
    name = "16x16"
    block_side = 4
    digits_enum = SixteenDigit
