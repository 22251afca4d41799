# -*- coding: utf-8 -*-
"""Table-driven transliteration between Indic scripts and romanizations.

::

    from indic_sanscript import sanscript
    sanscript.transliterate('namaste', sanscript.IAST, sanscript.DEVANAGARI)
"""

from indic_sanscript.scheme_map import MapCache, Options, SchemeMap
from indic_sanscript.schemes import Scheme, SchemeStore
from indic_sanscript.sanscript import (
  DEVANAGARI,
  GUJARATI,
  HK,
  IAST,
  ITRANS,
  KANNADA,
  SCHEMES,
  SLP1,
  TAMIL_SUPERSCRIPTED,
  TELUGU,
  Sanscript,
  get_engine,
  setup_default_schemes,
  transliterate,
  transliterate_wordwise,
)

__version__ = '0.1.0'

__all__ = [
  'DEVANAGARI', 'GUJARATI', 'HK', 'IAST', 'ITRANS', 'KANNADA', 'SLP1',
  'TAMIL_SUPERSCRIPTED', 'TELUGU', 'SCHEMES', 'MapCache', 'Options',
  'Sanscript', 'Scheme', 'SchemeMap', 'SchemeStore', 'get_engine',
  'setup_default_schemes', 'transliterate', 'transliterate_wordwise',
]
