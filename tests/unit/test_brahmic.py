"""Tests for transliteration from Brahmic schemes."""

from indic_sanscript.sanscript import (
  DEVANAGARI,
  GUJARATI,
  HK,
  IAST,
  ITRANS,
  KANNADA,
  SLP1,
  TELUGU,
)


def test_devanagari_to_iast(t):
  assert t('नमस्ते', DEVANAGARI, IAST) == 'namaste'
  assert t('नमस्कार', DEVANAGARI, IAST) == 'namaskāra'


def test_inherent_vowel_is_written_out(t):
  assert t('श्रीमद्भगवद्गीता', DEVANAGARI, IAST) == 'śrīmadbhagavadgītā'
  assert t('राम', DEVANAGARI, IAST) == 'rāma'


def test_virama_suppresses_inherent_vowel(t):
  assert t('वाक्', DEVANAGARI, IAST) == 'vāk'


def test_yogavaahas(t):
  assert t('संस्कृत', DEVANAGARI, IAST) == 'saṃskr̥ta'
  assert t('नमः!', DEVANAGARI, IAST) == 'namaḥ!'


def test_other_roman_targets(t):
  assert t('कृष्ण', DEVANAGARI, HK) == 'kRSNa'
  assert t('भगवद्गीता', DEVANAGARI, SLP1) == 'BagavadgItA'
  assert t('कृष्ण', DEVANAGARI, ITRANS) == 'kRRiShNa'


def test_brahmic_to_brahmic(t):
  assert t('नमस्ते', DEVANAGARI, TELUGU) == 'నమస్తే'
  assert t('నమస్తే', TELUGU, DEVANAGARI) == 'नमस्ते'
  assert t('राम', DEVANAGARI, KANNADA) == 'ರಾಮ'
  assert t('गीता', DEVANAGARI, GUJARATI) == 'ગીતા'


def test_unmapped_characters_pass_through(t):
  assert t('राम abc', DEVANAGARI, IAST) == 'rāma abc'


def test_digits(t):
  assert t('१०८', DEVANAGARI, IAST) == '108'


def test_zero_width_joiner_is_dropped_in_iast(t):
  assert t('क्\u200dष', DEVANAGARI, IAST) == 'kṣa'


def test_hash_pair_suspends_transliteration(t):
  assert t('न##म##त', DEVANAGARI, IAST) == 'naमta'


def test_single_hash_is_kept(t):
  assert t('न#त', DEVANAGARI, IAST) == 'na#ta'


def test_dangling_hash_at_end_is_dropped(t):
  assert t('न#', DEVANAGARI, IAST) == 'na'


def test_odd_hash_pairs_suspend_to_end(t):
  assert t('न##मत', DEVANAGARI, IAST) == 'naमत'


def test_accent_is_read_before_yogavaaha(t):
  """Devanagari writes the accent after the anusvara; IAST after the vowel."""
  assert t('कं॑', DEVANAGARI, IAST) == 'ka\u0301ṃ'


def test_accent_round_trip(t):
  assert t(t('कं॑', DEVANAGARI, IAST), IAST, DEVANAGARI) == 'कं॑'


def test_empty_input(t):
  assert t('', DEVANAGARI, IAST) == ''
