'''Divisor functions for the Sainte-Laguë highest-averages method.

A divisor function takes the order number (equal to the number of seats
allocated to the party so far) and returns the divisor by which to divide the
number of votes for that party. The party with the largest result then gets
the next seat.

The plain Sainte-Laguë sequence is 1, 3, 5... Some variants artificially
change the divisor for parties with no seats so far (`order == 0`); use
:func:`modified_first_coef` for that. The variant supported here starts at
0.5 (:func:`half_first`), which makes the first seat easier to obtain.
'''

from fractions import Fraction
from decimal import Decimal
from typing import Callable, Union
from numbers import Number

HALF = Fraction(1, 2)


def sainte_lague(order: int) -> int:
    '''Sainte-Laguë (Webster, Schepers) divisor.

    Forms a sequence 1, 3, 5...

    Treats large and small parties more evenly than the D'Hondt sequence.
    '''
    return 2 * order + 1


def modified_first_coef(divisor_fx: Callable[[int], Number],
                        first_coef: Union[int, Fraction, float, Decimal] = HALF,
                        ) -> Callable[[int], Number]:
    '''Modify the divisor for the zeroth order to an apriori coefficient.

    :param divisor_fx: The ordinary divisor function to be wrapped and used for
        the subsequent orders.
    :param first_coef: The coefficient to be used when order == 0. Floats and
        decimals are converted to exact fractions.
    '''
    if not isinstance(first_coef, (int, Fraction)):
        first_coef = Fraction(*first_coef.as_integer_ratio())
    if first_coef <= 0:
        raise ValueError(f'invalid first divisor: {first_coef}, must be >0')

    def _modified_divisor(order: int) -> Number:
        return divisor_fx(order) if order > 0 else first_coef
    _modified_divisor.__name__ = f'{divisor_fx.__name__}_first_{first_coef}'
    return _modified_divisor


def half_first(divisor_fx: Callable[[int], Number] = sainte_lague
               ) -> Callable[[int], Number]:
    '''Start the divisor sequence at 0.5 (0.5, 3, 5, 7...).'''
    return modified_first_coef(divisor_fx, HALF)


def get_divisor_function(use_half_first_divisor: bool = False
                         ) -> Callable[[int], Number]:
    '''Return the divisor function for the requested first-seat variant.'''
    if use_half_first_divisor:
        return half_first(sainte_lague)
    else:
        return sainte_lague
