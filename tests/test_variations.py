# -*- coding: utf-8 -*-

import pytest

from humanizer.exceptions import ConfigurationError, KeywordTooLongError
from humanizer.variations import case_variations, check_keyword_length, variation_count

@pytest.mark.unit
def test_case_variations_order():
    assert list(case_variations('ab')) == ['ab', 'Ab', 'aB', 'AB']

@pytest.mark.unit
@pytest.mark.parametrize('keyword', ['a', 'ab', 'abc', 'hello', 'password'])
def test_case_variations_count_and_distinct(keyword):
    variations = list(case_variations(keyword))
    assert len(variations) == 2 ** len(keyword) == variation_count(keyword)
    assert len(set(variations)) == len(variations)

@pytest.mark.unit
def test_case_variations_non_alpha():
    # digits take part in the mask but do not change
    assert list(case_variations('a1')) == ['a1', 'A1', 'a1', 'A1']
    assert list(case_variations('p@')) == ['p@', 'P@', 'p@', 'P@']

@pytest.mark.unit
def test_case_variations_empty():
    assert list(case_variations('')) == ['']

@pytest.mark.unit
def test_case_variations_keep_length():
    assert list(case_variations('ß')) == ['ß', 'S']

@pytest.mark.unit
def test_case_variations_is_lazy():
    variations = case_variations('a' * 40)
    assert next(variations) == 'a' * 40
    assert next(variations) == 'A' + 'a' * 39

@pytest.mark.unit
def test_check_keyword_length():
    check_keyword_length('abc', 3)
    check_keyword_length('a' * 100, 0)

    with pytest.raises(KeywordTooLongError) as e:
        check_keyword_length('abcd', 3)

    assert isinstance(e.value, ConfigurationError)
    assert e.value.keyword == 'abcd'
    assert e.value.limit == 3
