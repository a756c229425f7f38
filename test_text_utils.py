#!/usr/bin/env python3
"""
Specialized tests for text and player name utilities.

This test file focuses on:
- Foreign letter transliteration
- All-caps re-casing
- Letter counting for garbage filtering
- Player name canonicalization and idempotence
"""

import unittest

from utils import NameUtils, TextUtils


class TestTextUtils(unittest.TestCase):
    """Test cases for TextUtils."""

    def test_accents_stripped(self):
        """Test that accented letters map to their base letter."""
        self.assertEqual(TextUtils.foreign_letters_to_english('Réti'), 'Reti')
        self.assertEqual(TextUtils.foreign_letters_to_english('Hübner'), 'Hubner')
        self.assertEqual(TextUtils.foreign_letters_to_english('Špaček'), 'Spacek')
        self.assertEqual(TextUtils.foreign_letters_to_english('Ivanchuk'), 'Ivanchuk')

    def test_special_letters(self):
        """Test letters that do not decompose."""
        self.assertEqual(TextUtils.foreign_letters_to_english('Łódź'), 'Lodz')
        self.assertEqual(TextUtils.foreign_letters_to_english('Großmeister'), 'Grossmeister')
        self.assertEqual(TextUtils.foreign_letters_to_english('Ærø'), 'AEro')

    def test_unmapped_characters_pass_through(self):
        """Test that characters without an English letter are kept."""
        self.assertEqual(TextUtils.foreign_letters_to_english('Москва'), 'Москва')
        self.assertEqual(TextUtils.foreign_letters_to_english('1/2-1/2 ½'), '1/2-1/2 ½')

    def test_transliteration_idempotent(self):
        """Test that transliterating twice changes nothing more."""
        for text in ['Łódź', 'Ærøskøbing', 'São Paulo', 'Москва', 'Plain']:
            with self.subTest(text=text):
                once = TextUtils.foreign_letters_to_english(text)
                self.assertEqual(TextUtils.foreign_letters_to_english(once), once)

    def test_extra_map(self):
        """Test that extra replacements are applied."""
        self.assertEqual(TextUtils.foreign_letters_to_english('Ə', {'Ə': 'E'}), 'E')

    def test_title_case_if_all_caps(self):
        """Test re-casing of all-caps text."""
        self.assertEqual(TextUtils.title_case_if_all_caps('WORLD CUP'), 'World Cup')
        self.assertEqual(TextUtils.title_case_if_all_caps('OPEN 2019-A'), 'Open 2019-a')
        self.assertEqual(TextUtils.title_case_if_all_caps('World CUP'), 'World CUP')
        self.assertEqual(TextUtils.title_case_if_all_caps('mixed case'), 'mixed case')

    def test_title_case_keeps_whitespace(self):
        """Test that spacing between words is preserved."""
        self.assertEqual(TextUtils.title_case_if_all_caps('NEW  YORK'), 'New  York')

    def test_count_letters(self):
        """Test ASCII letter counting."""
        self.assertEqual(TextUtils.count_letters('A1'), 1)
        self.assertEqual(TextUtils.count_letters('St. Louis, USA'), 10)
        self.assertEqual(TextUtils.count_letters('?'), 0)
        self.assertEqual(TextUtils.count_letters('Łódź'), 1)


class TestNameUtils(unittest.TestCase):
    """Test cases for NameUtils."""

    def test_comma_spacing(self):
        """Test that "Last,First" separators are normalized."""
        self.assertEqual(NameUtils.normalize_player_name('Kasparov,Garry'), 'Kasparov, Garry')
        self.assertEqual(NameUtils.normalize_player_name('Kasparov , Garry'), 'Kasparov, Garry')

    def test_whitespace_collapsed(self):
        """Test that surrounding and repeated whitespace is removed."""
        self.assertEqual(NameUtils.normalize_player_name('  Fischer,   Robert  James '),
                         'Fischer, Robert James')

    def test_all_caps_name(self):
        """Test that all-caps names are re-cased."""
        self.assertEqual(NameUtils.normalize_player_name('TAL, MIKHAIL'), 'Tal, Mikhail')

    def test_foreign_letters(self):
        """Test that player names are transliterated."""
        self.assertEqual(NameUtils.normalize_player_name('Duda, Jan-Krzysztof'), 'Duda, Jan-Krzysztof')
        self.assertEqual(NameUtils.normalize_player_name('Ftáčnik, Ľubomír'), 'Ftacnik, Lubomir')

    def test_trailing_comma_removed(self):
        """Test that dangling separators are dropped."""
        self.assertEqual(NameUtils.normalize_player_name('Morphy,'), 'Morphy')

    def test_none_and_empty(self):
        """Test that missing names become an empty string."""
        self.assertEqual(NameUtils.normalize_player_name(None), '')
        self.assertEqual(NameUtils.normalize_player_name(''), '')

    def test_idempotent(self):
        """Test that canonicalizing a canonical name changes nothing."""
        names = ['CARLSEN,MAGNUS', '  Anand ,Viswanathan', 'Ftáčnik, Ľubomír', 'Morphy,',
                 "O'KELLY DE GALWAY, ALBERIC", '?', 'Xie Jun']
        for name in names:
            with self.subTest(name=name):
                once = NameUtils.normalize_player_name(name)
                self.assertEqual(NameUtils.normalize_player_name(once), once)


if __name__ == '__main__':
    unittest.main()
