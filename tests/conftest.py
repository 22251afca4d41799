"""Pytest fixtures for indic_sanscript tests."""

import pytest

from indic_sanscript.sanscript import Sanscript, setup_default_schemes
from indic_sanscript.schemes import SchemeStore


@pytest.fixture
def store():
  """A fresh store holding the bundled schemes."""
  result = SchemeStore()
  setup_default_schemes(result)
  return result


@pytest.fixture
def engine(store):
  """An engine with its own store and cache."""
  return Sanscript(store)


@pytest.fixture
def t(engine):
  """Shorthand for ``engine.transliterate``."""
  return engine.transliterate


@pytest.fixture
def tamil_superscripted():
  """A small tamil_superscripted scheme: enough to exercise the reordering
  of superscripted numbers."""
  return {
    'vowels': {'अ': 'அ', 'इ': 'இ'},
    'vowel_marks': {'ि': 'ி'},
    'virama': {'्': '்'},
    'consonants': {'क': 'க', 'ख': 'க²', 'म': 'ம'},
  }
