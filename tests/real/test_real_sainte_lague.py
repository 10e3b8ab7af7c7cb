import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import sainte_lague.apportion


@pytest.mark.parametrize('votes, n_seats, expected', [
    # German Bundestag 2013, vote shares in percent
    ([41.5, 25.7, 8.6, 8.4], 631, [311, 193, 64, 63]),
    # Rhineland-Palatinate Landtag
    ([362.0, 318.0, 126.0, 62.0, 53.0], 101, [39, 35, 14, 7, 6]),
    # Schleswig-Holstein Landtag, two equal parties
    ([308.0, 304.0, 132.0, 82.0, 82.0, 46.0], 69, [22, 22, 10, 6, 6, 3]),
    ([415.0, 257.0, 85.0, 85.0], 631, [311, 192, 64, 64]),
])
def test_real(votes, n_seats, expected):
    assert sainte_lague.apportion.distribute(votes, n_seats) == expected


def test_regions():
    votes = {'I': 1347, 'II': 1014, 'III': 1444}
    evaluator = sainte_lague.apportion.SainteLague()
    assert evaluator.evaluate(votes, 20) == {'I': 7, 'II': 5, 'III': 8}


def test_parties():
    votes = {'A': 983, 'B': 2040, 'C': 782}
    evaluator = sainte_lague.apportion.SainteLague()
    assert evaluator.evaluate(votes, 20) == {'A': 5, 'B': 11, 'C': 4}
