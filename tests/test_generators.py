# -*- coding: utf-8 -*-

import pytest

from humanizer.exceptions import ConfigurationError
from humanizer.generators import KeywordSource, generate_years

@pytest.mark.unit
@pytest.mark.parametrize('year_from,year_to', [(1990, 2025), (2000, 2000), (0, 9)])
def test_generate_years(year_from, year_to):
    years = generate_years(year_from, year_to)
    assert len(years) == year_to - year_from + 1
    assert years[0] == year_from
    assert years[-1] == year_to
    assert years == sorted(set(years))

@pytest.mark.unit
def test_generate_years_invalid():
    with pytest.raises(ConfigurationError):
        generate_years(2001, 2000)

@pytest.mark.unit
def test_keywords_from_string():
    source = KeywordSource()
    assert source.from_string('alice') == ['alice']
    assert source.from_string(' alice , bob,carol ') == ['alice', 'bob', 'carol']
    assert source.from_string('alice,,bob,') == ['alice', 'bob']

@pytest.mark.unit
def test_keywords_from_string_empty():
    with pytest.raises(ConfigurationError):
        KeywordSource().from_string(' , ')

@pytest.mark.unit
def test_keywords_from_file(tmp_path):
    path = tmp_path / 'keywords.txt'
    path.write_text('# company\nacme\n\n  widgets  \n#skip\nboston\n', encoding='utf-8')

    assert KeywordSource().from_file(str(path)) == ['acme', 'widgets', 'boston']

@pytest.mark.unit
def test_keywords_from_file_missing(tmp_path):
    with pytest.raises(ConfigurationError):
        KeywordSource().from_file(str(tmp_path / 'missing.txt'))

@pytest.mark.unit
def test_keywords_from_file_only_comments(tmp_path):
    path = tmp_path / 'keywords.txt'
    path.write_text('# nothing here\n\n', encoding='utf-8')

    with pytest.raises(ConfigurationError):
        KeywordSource().from_file(str(path))
