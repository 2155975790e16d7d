"""
Tests for friendly id generation.
"""
import datetime
import re

import pytest

from newsroom.slugs import normalize_friendly_id, significant_words, truncate_words

FRIENDLY_ID_RE = re.compile(r"^(\d{4})/(\d{2})/(\d{2})/([a-z_\d\-]+)$")


class TestNormalizeFriendlyId:
    """Tests for normalize_friendly_id."""

    def test_date_prefix(self):
        slug = normalize_friendly_id(
            "Ash defeats Gary in Indigo Plateau", datetime.date(1999, 11, 10)
        )
        year, month, day, _ = FRIENDLY_ID_RE.match(slug).groups()
        assert datetime.date(int(year), int(month), int(day)) == datetime.date(1999, 11, 10)

    def test_key_words_kept(self):
        slug = normalize_friendly_id(
            "Ash defeats Gary in Indigo Plateau", datetime.date(1999, 11, 10)
        )
        words = FRIENDLY_ID_RE.match(slug).group(4)
        for word in ["ash", "defeats", "gary", "indigo", "plateau"]:
            assert word in words
        assert "-in-" not in words
        assert slug == "1999/11/10/ash-defeats-gary-indigo-plateau"

    def test_lowercase_and_punctuation(self):
        slug = normalize_friendly_id("Pokémon: Gotta catch 'em ALL!", datetime.date(2000, 1, 2))
        assert slug == "2000/01/02/pokemon-gotta-catch-em-all"

    def test_long_title_limit(self):
        slug = normalize_friendly_id("a" * 49 + "-" + "b" * 50, datetime.date(1999, 11, 10), 50)
        words = FRIENDLY_ID_RE.match(slug).group(4)
        assert len(words) <= 50
        assert not words.endswith("-")
        assert words == "a" * 49

    def test_single_long_word_is_cut(self):
        slug = normalize_friendly_id("x" * 80, datetime.date(1999, 11, 10), 30)
        assert slug == "1999/11/10/" + "x" * 30

    def test_default_max_length_from_settings(self, settings):
        settings.NEWSROOM = {"SLUG_MAX_LENGTH": 12}
        slug = normalize_friendly_id("Pikachu wrecks everyone", datetime.date(2001, 2, 3))
        assert slug == "2001/02/03/pikachu"

    def test_idempotent(self):
        args = ("Ash defeats Gary in Indigo Plateau", datetime.date(1999, 11, 10), 20)
        assert normalize_friendly_id(*args) == normalize_friendly_id(*args)

    def test_only_stop_words(self):
        slug = normalize_friendly_id("In the", datetime.date(1999, 11, 10))
        assert slug == "1999/11/10/in-the"

    def test_custom_stop_words(self):
        slug = normalize_friendly_id(
            "Ash defeats Gary in Indigo Plateau",
            datetime.date(1999, 11, 10),
            stop_words=["gary"],
        )
        assert slug == "1999/11/10/ash-defeats-in-indigo-plateau"

    def test_aware_datetime_uses_local_date(self):
        published = datetime.datetime(1999, 11, 10, 23, 30, tzinfo=datetime.timezone.utc)
        slug = normalize_friendly_id("Ash wins", published)
        assert slug.startswith("1999/11/10/")

    def test_empty_title(self):
        with pytest.raises(ValueError):
            normalize_friendly_id("?!", datetime.date(1999, 11, 10))

    def test_invalid_max_length(self):
        with pytest.raises(ValueError):
            normalize_friendly_id("Ash wins", datetime.date(1999, 11, 10), 0)


class TestHelpers:
    def test_significant_words(self):
        assert significant_words("The Battle of the Gyms") == ["battle", "gyms"]

    def test_truncate_words_keeps_whole_words(self):
        assert truncate_words(["ash", "defeats", "gary"], 11) == "ash-defeats"
        assert truncate_words(["ash", "defeats", "gary"], 10) == "ash"
