from . import Digit, Domain, register_domain


class NineDigit(Digit):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9


@register_domain
class Nine(Domain):
    name = "9x9"
    block_side = 3
    digits_enum = NineDigit
