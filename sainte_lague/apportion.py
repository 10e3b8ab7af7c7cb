'''Sainte-Laguë seat apportionment.

The :func:`distribute` function allocates a fixed number of seats among
parties given as a positional sequence of vote counts, one seat at a time,
always to the party with the highest current quotient (votes divided by the
divisor for the number of seats it already holds). The
:class:`SainteLague` evaluator wraps it for votes keyed by party.

Ties between equal quotients are broken in favor of the party listed first
(lowest index, or earliest key for keyed votes). This rule is part of the
result contract: divisor methods are tie-sensitive at equal vote counts and
the result must be reproducible.

Quotients are computed as exact fractions, so floating point votes are taken
at their exact binary value and ties are never created or hidden by rounding.
'''

import heapq
import logging
import numbers
from fractions import Fraction
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Sequence, Union

import sainte_lague.divisor

logger = logging.getLogger(__name__)

VoteCount = Union[numbers.Real, Decimal]


class DistributionError(Exception):
    '''Seats cannot be distributed for the given input.'''
    pass


class InvalidVoteCount(DistributionError):
    '''A vote count is invalid, or there are no parties to award seats to.

    :param value: The offending vote count (or the whole votes sequence if
        it is the sequence itself that is malformed).
    :param party: Position (or key) of the party whose vote count is invalid.
        None if a specific party could not be pinpointed.
    :param allowed: Description of the values allowed at the given point.
    '''
    def __init__(self,
                 value: Any,
                 party: Any = None,
                 allowed: str = 'a finite number >=0',
                 ):
        self.value = value
        self.party = party
        self.allowed = allowed
        message = f'invalid vote count: {value!r}'
        if party is not None:
            message += f' for party {party!r}'
        message += f', must be {allowed}'
        super().__init__(message)


class InvalidSeatCount(DistributionError):
    '''The number of seats to distribute is not an integer >=0.

    :param value: The offending seat count.
    '''
    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f'invalid seat count: {value!r}, must be an integer >=0'
        )


def distribute(votes: Sequence[VoteCount],
               seats: int,
               use_half_first_divisor: bool = False,
               ) -> List[int]:
    '''Distribute seats among parties by the Sainte-Laguë method.

    Each of the *seats* is awarded to the party with the highest quotient of
    its votes and its current divisor; the divisors form the sequence
    1, 3, 5... by the number of seats already held.

    :param votes: Vote counts of the parties. Any non-negative finite real
        numbers, including floats, fractions and decimals.
    :param seats: Number of seats to distribute.
    :param use_half_first_divisor: Use 0.5 instead of 1 as the divisor for
        the first seat of each party.
    :returns: Numbers of seats awarded to the parties, in the order of
        *votes*, summing to *seats*.
    :raises InvalidVoteCount: If a vote count is negative, not finite or not
        a number, or if *votes* is empty and *seats* is positive.
    :raises InvalidSeatCount: If *seats* is negative or not an integer.
    '''
    exact_votes = [_exact_votes(n_votes, i) for i, n_votes in enumerate(votes)]
    if isinstance(seats, bool) or not isinstance(seats, numbers.Integral):
        raise InvalidSeatCount(seats)
    seats = int(seats)
    if seats < 0:
        raise InvalidSeatCount(seats)
    result = [0] * len(exact_votes)
    if seats == 0:
        return result
    if not exact_votes:
        raise InvalidVoteCount(
            list(votes), allowed=f'at least one party to award {seats} seats'
        )
    divisor_function = sainte_lague.divisor.get_divisor_function(
        use_half_first_divisor
    )
    logger.info('distributing %d seats among %d parties',
                seats, len(exact_votes))
    # min-heap: the highest quotient comes first, then the lowest index
    queue = [
        (-n_votes / divisor_function(0), i)
        for i, n_votes in enumerate(exact_votes)
    ]
    heapq.heapify(queue)
    for seat_i in range(seats):
        neg_quotient, party = heapq.heappop(queue)
        result[party] += 1
        logger.debug('seat %d to party %d with quotient %s',
                     seat_i + 1, party, -neg_quotient)
        heapq.heappush(queue, (
            -exact_votes[party] / divisor_function(result[party]),
            party
        ))
    return result


def _exact_votes(n_votes: Any, party: int) -> Fraction:
    if isinstance(n_votes, bool) or not isinstance(
        n_votes, (numbers.Real, Decimal)
    ):
        raise InvalidVoteCount(n_votes, party)
    try:
        exact = Fraction(n_votes)
    except (ValueError, OverflowError) as err:
        # NaN or infinity
        raise InvalidVoteCount(n_votes, party) from err
    if exact < 0:
        raise InvalidVoteCount(n_votes, party)
    return exact


class SainteLague:
    '''Distribute seats proportionally to parties by Sainte-Laguë divisors.

    A distribution evaluator over votes keyed by party. Parties are ordered
    by the iteration order of the votes mapping, which also decides ties
    (the earlier party wins).

    :param use_half_first_divisor: Use 0.5 instead of 1 as the divisor for
        the first seat of each party.
    '''
    def __init__(self, use_half_first_divisor: bool = False):
        self.use_half_first_divisor = use_half_first_divisor
        self.divisor_function = sainte_lague.divisor.get_divisor_function(
            use_half_first_divisor
        )

    def evaluate(self,
                 votes: Mapping[Any, VoteCount],
                 n_seats: int,
                 ) -> Dict[Any, int]:
        '''Distribute seats proportionally by highest averages.

        :param votes: Vote counts keyed by party.
        :param n_seats: Number of seats to be filled.
        :returns: Numbers of seats keyed by party. Parties with no seats
            are omitted.
        '''
        parties = list(votes.keys())
        try:
            seats = distribute(
                list(votes.values()), n_seats, self.use_half_first_divisor
            )
        except InvalidVoteCount as err:
            if err.party is None:
                raise
            raise InvalidVoteCount(
                err.value, parties[err.party], err.allowed
            ) from err
        return {
            party: n_party_seats
            for party, n_party_seats in zip(parties, seats)
            if n_party_seats > 0
        }

    def to_dict(self) -> Dict[str, Any]:
        '''Serialize the evaluator setup to a JSON-compatible dictionary.'''
        return {
            'class': _scoped_class_name(self),
            'use_half_first_divisor': self.use_half_first_divisor,
        }

    @classmethod
    def from_dict(cls, setup: Dict[str, Any]) -> 'SainteLague':
        '''Reconstruct the evaluator from the output of :meth:`to_dict`.'''
        class_name = setup.get('class')
        if class_name != _scoped_class_name(cls):
            raise ValueError(f'cannot deserialize {class_name!r} as {cls}')
        return cls(bool(setup.get('use_half_first_divisor', False)))

    def __repr__(self):
        return (
            f'{self.__class__.__name__}'
            f'(use_half_first_divisor={self.use_half_first_divisor!r})'
        )


def _scoped_class_name(obj: Any) -> str:
    class_ = obj if isinstance(obj, type) else type(obj)
    return '.'.join((class_.__module__, class_.__qualname__))
