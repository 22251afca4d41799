"""Tests for map construction, options and the map cache."""

import logging

import pytest

from indic_sanscript.scheme_map import MapCache, Options, SchemeMap
from indic_sanscript.schemes import Scheme, SchemeStore


@pytest.fixture
def pair():
  """A tiny Brahmic/roman pair."""
  store = SchemeStore()
  store.add_brahmic_scheme('b', {
    'vowels': {'अ': 'अ', 'आ': 'आ'},
    'vowel_marks': {'ा': 'ा'},
    'virama': {'्': '्'},
    'consonants': {'क': 'क', 'ग': 'ग'},
    'yogavaahas': {'ं': 'ं'},
    'accents': {'॑': '॑'},
    'symbols': {'।': '।'},
  })
  store.add_roman_scheme('r', {
    'vowels': {'अ': 'a', 'आ': 'A'},
    'virama': {'्': ''},
    'consonants': {'क': 'k', 'ग': 'gh'},
    'yogavaahas': {'ं': 'M'},
    'accents': {'॑': "'"},
    'alternates': {'A': ['aa', 'aaa']},
    'accented_vowel_alternates': {"A'": ['Á']},
  })
  return store.get('b'), store.get('r')


def test_roman_to_brahmic_tables(pair):
  brahmic, roman = pair
  scheme_map = SchemeMap(roman, brahmic, 'r', 'b')

  assert scheme_map.from_roman and not scheme_map.to_roman
  assert scheme_map.letters['k'] == 'क'
  assert scheme_map.letters['A'] == 'आ'
  assert scheme_map.marks['A'] == 'ा'
  assert scheme_map.consonants == {'k': 'क', 'gh': 'ग'}
  assert scheme_map.accents == {"'": '॑'}
  assert scheme_map.virama == '्'
  assert scheme_map.from_scheme_a == 'a'
  assert scheme_map.to_scheme_a == 'अ'


def test_alternates_share_the_mapping(pair):
  brahmic, roman = pair
  scheme_map = SchemeMap(roman, brahmic)

  for token in ('A', 'aa', 'aaa'):
    assert scheme_map.letters[token] == 'आ'
    assert scheme_map.marks[token] == 'ा'
  # The longest alternate sets the token window.
  assert scheme_map.max_token_length == 3


def test_accented_vowel_alternates(pair):
  brahmic, roman = pair
  scheme_map = SchemeMap(roman, brahmic)

  assert scheme_map.letters['Á'] == 'आ॑'
  assert scheme_map.marks['Á'] == 'ा॑'


def test_brahmic_to_roman_tables(pair):
  brahmic, roman = pair
  scheme_map = SchemeMap(brahmic, roman)

  assert not scheme_map.from_roman and scheme_map.to_roman
  assert scheme_map.marks == {'ा': 'A', '्': ''}
  assert scheme_map.letters['ग'] == 'gh'
  assert scheme_map.virama == ''
  assert scheme_map.to_scheme_a == 'a'
  # 'symbols' is missing from the roman scheme and is skipped entirely.
  assert '।' not in scheme_map.letters


def test_empty_target_falls_back_to_source():
  """An empty destination value means "copy the source", except for the
  virama, zwj and skip groups."""
  source = Scheme({'symbols': {'।': '|'}, 'virama': {'्': '्'},
                   'zwj': {'\u200d': '\u200d'}}, is_roman=False)
  dest = Scheme({'symbols': {'।': ''}, 'virama': {'्': ''},
                 'zwj': {'\u200d': ''}})
  scheme_map = SchemeMap(source, dest)

  assert scheme_map.letters['|'] == '|'
  assert scheme_map.marks['्'] == ''
  assert scheme_map.letters['\u200d'] == ''


def test_missing_keys_are_skipped():
  source = Scheme({'consonants': {'क': 'k', 'ख': 'kh'}})
  dest = Scheme({'consonants': {'क': 'क'}}, is_roman=False)
  scheme_map = SchemeMap(source, dest)

  assert scheme_map.letters == {'k': 'क'}
  assert scheme_map.max_token_length == 1


def test_empty_schemes():
  scheme_map = SchemeMap(Scheme(is_roman=False), Scheme(is_roman=False))

  assert scheme_map.letters == {}
  assert scheme_map.marks == {}
  assert scheme_map.max_token_length == 0
  assert scheme_map.virama == ''
  assert scheme_map.from_scheme_a == ''


def test_unmapped_accented_base_vowel_is_logged(caplog):
  source = Scheme({'accents': {'॑': "'"}},
                  accented_vowel_alternates={"o'": ['ó']})
  dest = Scheme({'accents': {'॑': '॑'}}, is_roman=False)

  with caplog.at_level(logging.WARNING, logger='indic_sanscript.scheme_map'):
    scheme_map = SchemeMap(source, dest, 'src', 'dst')

  assert 'unmapped base vowel' in caplog.text
  assert scheme_map.letters['ó'] == '॑'


def test_options_equality_and_copy():
  options = Options(syncope=True, preferred_alternates={'iast': {'ṃ': 'ṁ'}})
  snapshot = options.copy()

  assert snapshot == options
  assert snapshot is not options
  options.preferred_alternates['iast']['ṃ'] = 'm'
  assert snapshot != options
  assert Options() == Options(preferred_alternates={})


def test_options_replace():
  options = Options().replace(skip_sgml=True, preferred_alternates=None)
  assert options.skip_sgml
  assert options.preferred_alternates == {}

  with pytest.raises(TypeError, match='Unexpected keyword argument'):
    Options().replace(verbose=True)


def test_cache_reuses_map_for_equal_key():
  cache = MapCache()
  calls = []

  def build():
    calls.append(1)
    return object()

  first = cache.get('a', 'b', Options(), build)
  second = cache.get('a', 'b', Options(), build)

  assert first is second
  assert len(calls) == 1
  assert len(cache) == 1


def test_cache_holds_a_single_entry():
  cache = MapCache()
  calls = []

  def build():
    calls.append(1)
    return object()

  cache.get('a', 'b', Options(), build)
  cache.get('c', 'd', Options(), build)
  cache.get('a', 'b', Options(), build)
  assert len(calls) == 3

  cache.get('a', 'b', Options(syncope=True), build)
  assert len(calls) == 4


def test_cache_snapshot_ignores_later_option_mutation():
  cache = MapCache()
  options = Options(preferred_alternates={'iast': {}})
  first = cache.get('a', 'b', options, object)
  options.preferred_alternates['iast']['x'] = 'y'

  assert cache.get('a', 'b', options, object) is not first


def test_cache_clear():
  cache = MapCache()
  cache.get('a', 'b', Options(), object)
  cache.clear()
  assert len(cache) == 0
