from . import Digit, Domain, register_domain


class FourDigit(Digit):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4


@register_domain
class Four(Domain):
    name = "4x4"
    block_side = 2
    digits_enum = FourDigit
