# -*- coding: utf-8 -*-
"""
indic_sanscript.sanscript
~~~~~~~~~~~~~~~~~~~~~~~~~

Transliteration functions for Sanskrit. The most important function is
:func:`transliterate`, which is very easy to use::

    output = transliterate(data, IAST, DEVANAGARI)

By default, the module supports the following scripts:

- Devanagari_
- Gujarati_
- Kannada_
- Telugu_

and the following romanizations:

- Harvard-Kyoto_
- IAST_ (also known as Roman Unicode)
- ITRANS
- SLP1

Each of these **schemes** is registered in the default
:class:`~indic_sanscript.schemes.SchemeStore` `SCHEMES`, whose keys are
strings::

    devanagari_scheme = SCHEMES.get(DEVANAGARI)

Applications that want their own set of schemes create a :class:`Sanscript`
engine with a store of their own::

    engine = Sanscript()
    engine.add_roman_scheme('my_scheme', {...})
    output = engine.transliterate(data, 'my_scheme', DEVANAGARI)

Two conventions are recognized in the input text:

- ``##`` toggles transliteration off and on in roman input; ``#`` pairs do
  the same in Brahmic input. The toggles themselves are dropped.
- With ``skip_sgml=True``, anything between ``<`` and ``>`` is kept as is.

:license: MIT

.. _Devanagari: http://en.wikipedia.org/wiki/Devanagari
.. _Gujarati: http://en.wikipedia.org/wiki/Gujarati_alphabet
.. _Kannada: http://en.wikipedia.org/wiki/Kannada_alphabet
.. _Telugu: http://en.wikipedia.org/wiki/Telugu_alphabet

.. _Harvard-Kyoto: http://en.wikipedia.org/wiki/Harvard-Kyoto
.. _IAST: http://en.wikipedia.org/wiki/IAST
"""

import logging
import re

from indic_sanscript import data as _data
from indic_sanscript.scheme_map import MapCache, Options, SchemeMap
from indic_sanscript.schemes import Scheme, SchemeStore, VIRAMA

logger = logging.getLogger(__name__)

# Brahmic schemes
# ---------------
#: Internal name of Devanagari.
DEVANAGARI = 'devanagari'

#: Internal name of Gujarati.
GUJARATI = 'gujarati'

#: Internal name of Kannada.
KANNADA = 'kannada'

#: Internal name of Telugu.
TELUGU = 'telugu'

#: Internal name of Tamil with superscripted consonant numbers. Not bundled,
#: but text in it is reordered before and after scanning.
TAMIL_SUPERSCRIPTED = 'tamil_superscripted'

# Roman schemes
# -------------
#: Internal name of Harvard-Kyoto.
HK = 'hk'

#: Internal name of IAST.
IAST = 'iast'

#: Internal name of ITRANS
ITRANS = 'itrans'

#: Internal name of SLP1.
SLP1 = 'slp1'

#: Toggle token for roman input.
TOGGLE = '##'

# ITRANS escapes a character with a backslash, except for the accent
# escapes \' \` and \_.
_ITRANS_ESCAPE = re.compile(r"\\([^'`_]|\Z)")

#: Superscripted numbers used by tamil_superscripted to distinguish
#: consonants, e.g. க² for ख.
_TAMIL_SUPERSCRIPTS = frozenset('²³⁴')

#: Vedic accents that may sit between a consonant and its number.
_TAMIL_ACCENTS = '॒॑'


def _swap_pairs(text, first, second):
  """Swap every adjacent pair ``xy`` with `x` in `first` and `y` in
  `second`, scanning left to right. Swapped characters are not reconsidered.
  """
  if not first or not second:
    return text
  buf = []
  append = buf.append
  i = 0
  len_text = len(text)
  while i < len_text:
    c = text[i]
    if c in first and i + 1 < len_text and text[i + 1] in second:
      append(text[i + 1])
      append(c)
      i += 2
    else:
      append(c)
      i += 1
  return ''.join(buf)


def _move_superscripts(text, mark_chars, before):
  """Move tamil_superscripted numbers across an adjacent run of marks.

  :param before: if `True`, a run of marks followed by a number becomes the
                 number followed by the run (input side). Otherwise a
                 number followed by a run becomes the run followed by the
                 number (output side).
  """
  buf = []
  append = buf.append
  i = 0
  len_text = len(text)
  while i < len_text:
    c = text[i]
    if before and c in mark_chars:
      j = i
      while j < len_text and text[j] in mark_chars:
        j += 1
      if j < len_text and text[j] in _TAMIL_SUPERSCRIPTS:
        append(text[j])
        append(text[i:j])
        i = j + 1
      else:
        append(text[i:j])
        i = j
    elif not before and c in _TAMIL_SUPERSCRIPTS:
      j = i + 1
      while j < len_text and text[j] in mark_chars:
        j += 1
      append(text[i + 1:j])
      append(c)
      i = j
    else:
      append(c)
      i += 1
  return ''.join(buf)


def _tamil_mark_chars(scheme):
  marks = ''.join(scheme.group('vowel_marks').values())
  virama = scheme.group('virama').get(VIRAMA, '')
  return frozenset(marks + virama + _TAMIL_ACCENTS)


def _roman(data, scheme_map, options):
  """Transliterate `data` with the given `scheme_map`. This function is used
  when the source scheme is a Roman scheme.

  :param data: the data to transliterate
  :param scheme_map: a :class:`~indic_sanscript.scheme_map.SchemeMap`
  :param options: the :class:`~indic_sanscript.scheme_map.Options` in effect
  """
  letters = scheme_map.letters
  marks = scheme_map.marks
  consonants = scheme_map.consonants
  virama = scheme_map.virama
  from_scheme_a = scheme_map.from_scheme_a
  to_roman = scheme_map.to_roman
  # An empty map still has to make progress through `data`.
  longest = max(scheme_map.max_token_length, 1)
  opt_skip_sgml = options.skip_sgml
  opt_syncope = options.syncope

  buf = []
  append = buf.append
  i = 0
  len_data = len(data)
  token_buffer = ''
  had_consonant = False

  # If true, don't transliterate. The tag is retained.
  skipping_sgml = False
  # If true, don't transliterate. The toggle token is discarded.
  toggled = False

  while i < len_data or token_buffer:
    # The longest token in the source scheme has length `longest`. Keep up
    # to `longest` characters in `token_buffer`; if its contents aren't in
    # our scheme map, lop off a character and try again.
    if len(token_buffer) < longest and i < len_data:
      chunk = data[i:i + longest - len(token_buffer)]
      token_buffer += chunk
      i += len(chunk)

    for length in range(min(longest, len(token_buffer)), 0, -1):
      token = token_buffer[:length]

      if skipping_sgml:
        skipping_sgml = (token != '>')
      elif token == '<':
        skipping_sgml = opt_skip_sgml
      elif token == TOGGLE:
        toggled = not toggled
        token_buffer = token_buffer[2:]
        break

      if skipping_sgml or toggled:
        # End any lingering consonant before the raw text begins.
        if had_consonant:
          had_consonant = False
          if not opt_syncope:
            append(virama)
        if length == 1:
          append(token)
          token_buffer = token_buffer[1:]
        continue

      letter = letters.get(token)
      if letter is not None:
        if to_roman:
          append(letter)
        else:
          # Catch the pattern CV, where C is a consonant and V is a vowel.
          # V should be rendered as a vowel mark, a.k.a. a "dependent"
          # vowel. But due to the nature of Brahmic scripts, 'a' is implicit
          # and has no vowel mark. If we see 'a', add nothing.
          if had_consonant:
            mark = marks.get(token)
            if mark is not None:
              append(mark)
            elif token != from_scheme_a:
              append(virama)
              append(letter)
          else:
            append(letter)
          had_consonant = token in consonants
        token_buffer = token_buffer[length:]
        break

      if length == 1:
        # Some other character. Due to the implicit 'a', we must explicitly
        # end any lingering consonant before we can handle it.
        if had_consonant:
          had_consonant = False
          if not opt_syncope:
            append(virama)
        append(token)
        token_buffer = token_buffer[1:]

  if had_consonant and not opt_syncope:
    append(virama)

  result = ''.join(buf)
  if not to_roman and scheme_map.accents:
    # Brahmic scripts write the accent after the anusvara or visarga.
    result = _swap_pairs(result, scheme_map.accent_marks,
                         scheme_map.to_yogavaahas)
  return result


def _brahmic(data, scheme_map, options):
  """Transliterate `data` with the given `scheme_map`. This function is used
  when the source scheme is a Brahmic scheme.

  :param data: the data to transliterate
  :param scheme_map: a :class:`~indic_sanscript.scheme_map.SchemeMap`
  :param options: the :class:`~indic_sanscript.scheme_map.Options` in effect
  """
  marks = scheme_map.marks
  letters = scheme_map.letters
  consonants = scheme_map.consonants
  to_roman = scheme_map.to_roman
  to_scheme_a = scheme_map.to_scheme_a

  if to_roman and scheme_map.accents:
    # Read the accent right after its vowel, before the anusvara or visarga.
    data = _swap_pairs(data, scheme_map.from_yogavaahas,
                       scheme_map.from_accent_tokens)

  buf = []
  append = buf.append
  dangling_hash = False
  had_roman_consonant = False
  skipping = False

  for L in data:
    if L == '#':
      if dangling_hash:
        skipping = not skipping
        dangling_hash = False
      else:
        dangling_hash = True
      if had_roman_consonant:
        append(to_scheme_a)
        had_roman_consonant = False
      continue
    elif skipping:
      append(L)
      continue

    mark = marks.get(L)
    if mark is not None:
      append(mark)
      had_roman_consonant = False
    else:
      if dangling_hash:
        append('#')
        dangling_hash = False
      if had_roman_consonant:
        append(to_scheme_a)
        had_roman_consonant = False
      letter = letters.get(L)
      if letter is not None:
        append(letter)
        had_roman_consonant = to_roman and L in consonants
      else:
        append(L)

  if had_roman_consonant:
    append(to_scheme_a)
  return ''.join(buf)


def _expand_shortcuts(data, shortcuts):
  for (key, shortcut) in shortcuts.items():
    if shortcut in key:
      # The long form may already be present; don't expand it twice.
      data = data.replace(key, shortcut)
    data = data.replace(shortcut, key)
  return data


def _contract_shortcuts(data, shortcuts):
  for (key, shortcut) in shortcuts.items():
    if key in shortcut:
      data = data.replace(shortcut, key)
    data = data.replace(key, shortcut)
  return data


class Sanscript:
  """A transliteration engine: a scheme store, default options and a cache
  of the most recently used :class:`~indic_sanscript.scheme_map.SchemeMap`.

  :param store: the :class:`~indic_sanscript.schemes.SchemeStore` to use. A
                new, empty store is created if omitted.
  :param defaults: the :class:`~indic_sanscript.scheme_map.Options` used
                   when a call passes none.
  """

  def __init__(self, store=None, defaults=None):
    self.schemes = store if store is not None else SchemeStore()
    self.defaults = defaults or Options()
    self._cache = MapCache()

  def add_brahmic_scheme(self, name, data):
    scheme = self.schemes.add_brahmic_scheme(name, data)
    self._cache.clear()
    return scheme

  def add_roman_scheme(self, name, data):
    scheme = self.schemes.add_roman_scheme(name, data)
    self._cache.clear()
    return scheme

  def _lookup(self, name):
    scheme = self.schemes.get(name)
    if scheme is None:
      logger.warning('Unknown scheme %r; text will pass through unchanged',
                     name)
      scheme = Scheme(is_roman=False)
    return scheme

  def _resolve_options(self, options, kw):
    if options is None:
      options = self.defaults
    if kw:
      options = options.replace(**kw)
    return options

  def scheme_map(self, _from, _to, options=None):
    """Return the :class:`~indic_sanscript.scheme_map.SchemeMap` from `_from`
    to `_to`, reusing the cached one when `_from`, `_to` and `options` are
    unchanged since the last call."""
    if options is None:
      options = self.defaults

    def build():
      return SchemeMap(self._lookup(_from), self._lookup(_to), _from, _to)

    return self._cache.get(_from, _to, options, build)

  def transliterate(self, data, _from=None, _to=None, scheme_map=None,
                    options=None, **kw):
    """Transliterate `data` with the given parameters::

        output = engine.transliterate('idam adbhutam', HK, DEVANAGARI)

    The map from `_from` to `_to` is built on the first call and reused as
    long as the scheme names and options stay the same. A pre-computed
    :class:`~indic_sanscript.scheme_map.SchemeMap` may also be passed::

        scheme_map = engine.scheme_map(HK, DEVANAGARI)
        output = engine.transliterate('idam adbhutam', scheme_map=scheme_map)

    :param data: the data to transliterate
    :param _from: the name of a source scheme
    :param _to: the name of a destination scheme
    :param scheme_map: the map to use. If specified, ignore `_from` and
                       `_to`.
    :param options: an :class:`~indic_sanscript.scheme_map.Options`. If
                    unspecified, use :attr:`defaults`.
    :param kw: ``skip_sgml``, ``syncope`` or ``preferred_alternates``,
               overriding the corresponding field of `options`.
    :raises TypeError: on any other keyword argument.
    """
    options = self._resolve_options(options, kw)
    if scheme_map is None:
      scheme_map = self.scheme_map(_from, _to, options)
    else:
      _from = scheme_map.from_name
      _to = scheme_map.to_name

    from_scheme = self.schemes.get(_from)
    to_scheme = self.schemes.get(_to)

    if _from == ITRANS:
      data = data.replace('{\\m+}', '.h.N')
      data = data.replace('.h', '')
      data = _ITRANS_ESCAPE.sub(r'##\1##', data)

    if _from == TAMIL_SUPERSCRIPTED and from_scheme is not None:
      logger.warning('Transliteration from %s is not fully implemented',
                     TAMIL_SUPERSCRIPTED)
      data = _move_superscripts(data, _tamil_mark_chars(from_scheme),
                                before=True)

    if from_scheme is not None:
      data = _expand_shortcuts(data, from_scheme.group('shortcuts'))

    func = _roman if scheme_map.from_roman else _brahmic
    result = func(data, scheme_map, options)

    if to_scheme is not None:
      result = _contract_shortcuts(result, to_scheme.group('shortcuts'))

    if _to == TAMIL_SUPERSCRIPTED and to_scheme is not None:
      result = _move_superscripts(result, _tamil_mark_chars(to_scheme),
                                  before=False)

    for (key, value) in options.preferred_alternates.get(_to, {}).items():
      result = result.replace(key, value)
    return result

  def transliterate_wordwise(self, data, _from=None, _to=None, options=None,
                             **kw):
    """Transliterate each space-separated word of `data` on its own, for the
    benefit of script learners.

    :returns: a :class:`list` of ``(word, transliterated_word)`` tuples, in
              input order.
    """
    options = self._resolve_options(options, kw)
    return [(word, self.transliterate(word, _from, _to, options=options))
            for word in data.split(' ') if word]


#: The default scheme store, populated with the bundled schemes.
SCHEMES = SchemeStore()

_engine = Sanscript(SCHEMES)


def get_engine():
  """Return the module-level :class:`Sanscript` behind :func:`transliterate`."""
  return _engine


def transliterate(data, _from=None, _to=None, scheme_map=None, options=None,
                  **kw):
  """Transliterate `data` with the default engine::

      output = transliterate('idam adbhutam', HK, DEVANAGARI)

  See :meth:`Sanscript.transliterate`.
  """
  return _engine.transliterate(data, _from, _to, scheme_map=scheme_map,
                               options=options, **kw)


def transliterate_wordwise(data, _from=None, _to=None, options=None, **kw):
  """See :meth:`Sanscript.transliterate_wordwise`."""
  return _engine.transliterate_wordwise(data, _from, _to, options=options,
                                        **kw)


def setup_default_schemes(store):
  """Add the bundled schemes to `store`.

  :param store: a :class:`~indic_sanscript.schemes.SchemeStore`
  """
  for (name, scheme) in _data.BRAHMIC_SCHEMES.items():
    store.add_brahmic_scheme(name, scheme)
  for (name, scheme) in _data.ROMAN_SCHEMES.items():
    store.add_roman_scheme(name, scheme)


def _setup():
  """Add a variety of default schemes."""
  setup_default_schemes(SCHEMES)


_setup()
