# -*- coding: utf-8 -*-

import pytest

from humanizer.substitutions import (
    HUMAN_ALTERNATIVES,
    SPECIAL_CHARS,
    apply_substitutions,
    special_chars,
)

@pytest.mark.unit
def test_apply_substitutions():
    test_pairs = [
        ('ab', '@b'),
        ('cd', 'cd'),
        ('password', 'p@ssw0rd'),
        ('piano', 'p!@n0'),
        ('Elite', '3l!t3'),
        ('SAT', '547'),
        ('BIZ', '8!2'),
        ('', ''),
    ]

    for keyword, expected in test_pairs:
        assert apply_substitutions(keyword) == expected

@pytest.mark.unit
def test_substitution_keeps_length():
    for keyword in ('password', 'Summer', 'ZEBRA', 'illegible'):
        assert len(apply_substitutions(keyword)) == len(keyword)

@pytest.mark.unit
def test_substitution_order_matters():
    # I -> 1 and then 1 -> !
    assert apply_substitutions('I') == '!'
    assert apply_substitutions('I', (('!', '1'), ('1', 'I'))) == '1'

@pytest.mark.unit
def test_literal_replacements_run_with_empty_table():
    assert apply_substitutions('ie', ()) == 'ie'
    assert apply_substitutions('ie', (('x', 'y'),)) == '13'

@pytest.mark.unit
def test_table_order():
    assert [alt for alt, _ in HUMAN_ALTERNATIVES] == ['@', '4', '1', '!', '0', '5', '3', '7', '$', '2', '8']
    assert [classic for _, classic in HUMAN_ALTERNATIVES] == ['a', 'A', 'I', '1', 'o', 'S', 'E', 'T', 'S', 'Z', 'B']

@pytest.mark.unit
def test_special_chars_keep_duplicate():
    chars = special_chars()
    assert chars == ['!', '?', ',', ';', ',', '-', '_']
    assert chars.count(',') == 2

    # a copy is returned
    chars.append('#')
    assert len(SPECIAL_CHARS) == 7
