"""Sainte-Laguë - proportional seat apportionment by odd divisors.

The Sainte-Laguë (also Webster or Schepers) method distributes a fixed number
of seats among parties one at a time, each seat going to the party with the
highest quotient of its votes divided by 1, 3, 5... according to the number of
seats it already holds. It is used in Germany, New Zealand, Sweden and
elsewhere, often with local modifications; check the electoral law of the
given country before relying on the plain variant provided here.

-   :func:`distribute` apportions seats among parties given positionally.
-   :class:`SainteLague` does the same for votes keyed by party.
-   The :mod:`divisor` module provides the divisor sequences, including the
    variant that uses 0.5 as the divisor for each party's first seat.

Invalid input raises a subclass of :class:`DistributionError`:
:class:`InvalidVoteCount` or :class:`InvalidSeatCount`.
"""

from sainte_lague.apportion import (    # noqa
    distribute,
    SainteLague,
    DistributionError,
    InvalidVoteCount,
    InvalidSeatCount,
)
