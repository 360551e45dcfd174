"""
tests/test_update_normalizer.py

Pytest unit tests for UpdateNormalizer.

All tests are pure Python: raw records in, update items out.

Coverage
--------
- Length boundary (29 rejected, 30 emitted)
- Fingerprint deduplication within one batch, reset across batches
- Date extraction families and their precedence
- Whole-word update keyword classification
- Title derivation, truncation and idempotence
- Content preview truncation
- Pre-filter index ids
- Stable ranking by likely-update flag then length
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from app.scraping.normalization import UpdateNormalizer, derive_title, extract_date, is_likely_update
from app.scraping.types import RawContentRecord

CAPTURED_AT = datetime(2025, 1, 5, 12, 0, tzinfo=timezone.utc)


def _record(text: str) -> RawContentRecord:
    return RawContentRecord(text=text, html=f"<p>{text}</p>", tag_name="DIV", class_name="entry")


def _normalize(texts: list[str], name: str = "Braze") -> list:
    return UpdateNormalizer().normalize(
        records=[_record(text) for text in texts],
        competitor_name=name,
        extracted_at=CAPTURED_AT,
    )


@pytest.fixture()
def normalizer() -> UpdateNormalizer:
    return UpdateNormalizer()


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


class TestFiltering:
    def test_29_characters_rejected(self) -> None:
        assert _normalize(["x" * 29]) == []

    def test_30_characters_emitted(self) -> None:
        items = _normalize(["x" * 30])
        assert len(items) == 1
        assert items[0].content_length == 30

    def test_length_measured_after_trim(self) -> None:
        assert _normalize(["   " + "y" * 29 + "\n\n  "]) == []

    def test_every_item_is_at_least_30_characters(self) -> None:
        texts = ["short", "a" * 31, " " * 40, "b" * 45, "c" * 10]
        items = _normalize(texts)
        assert items
        assert all(item.content_length >= 30 for item in items)

    def test_empty_batch_yields_no_items(self, normalizer: UpdateNormalizer) -> None:
        assert normalizer.normalize(records=[], competitor_name="Braze") == []


# ---------------------------------------------------------------------------
# Deduplication
# ---------------------------------------------------------------------------


class TestDeduplication:
    def test_same_first_100_characters_rejected(self) -> None:
        prefix = "p" * 100
        items = _normalize([prefix + " first tail", prefix + " second, longer tail"])
        assert len(items) == 1
        assert items[0].full_content.endswith("first tail")

    def test_difference_within_first_100_characters_kept(self) -> None:
        items = _normalize(["a" * 99 + "X tail", "a" * 99 + "Y tail"])
        assert len(items) == 2

    def test_fingerprints_unique_in_output(self) -> None:
        texts = ["z" * 120, "z" * 130, "q" * 50, "q" * 50, "w" * 100 + "1", "w" * 100 + "2"]
        fingerprints = [item.full_content[:100] for item in _normalize(texts)]
        assert len(fingerprints) == len(set(fingerprints))

    def test_seen_set_is_scoped_to_one_call(self, normalizer: UpdateNormalizer) -> None:
        records = [_record("Repeated release entry with enough text")]
        first = normalizer.normalize(records=records, competitor_name="Braze")
        second = normalizer.normalize(records=records, competitor_name="Iterable")
        assert len(first) == 1
        assert len(second) == 1


# ---------------------------------------------------------------------------
# Date extraction
# ---------------------------------------------------------------------------


class TestExtractDate:
    def test_long_form_with_comma(self) -> None:
        assert extract_date("Shipped on January 5, 2025 to all") == "January 5, 2025"

    def test_long_form_without_comma_case_insensitive(self) -> None:
        assert extract_date("released MARCH 12 2024 globally") == "MARCH 12 2024"

    def test_slash_date(self) -> None:
        assert extract_date("Updated 3/7/2025 for EU") == "3/7/2025"

    def test_iso_date(self) -> None:
        assert extract_date("Changelog 2025-02-14 entry") == "2025-02-14"

    def test_long_form_preferred_over_iso(self) -> None:
        text = "2024-12-01 build notes, published December 3, 2024"
        assert extract_date(text) == "December 3, 2024"

    def test_slash_preferred_over_iso(self) -> None:
        assert extract_date("2024-12-01 then 12/02/2024") == "12/02/2024"

    def test_abbreviated_month_not_long_form(self) -> None:
        assert extract_date("Jan 5, 2025 only") is None

    def test_no_date(self) -> None:
        assert extract_date("Nothing that looks like a date here") is None

    def test_non_ascii_digits_not_dates(self) -> None:
        assert extract_date("Released January \u0665, \u0662\u0660\u0662\u0665 today") is None
        assert extract_date("Shipped \u0662\u0660\u0662\u0665-\u0660\u0661-\u0660\u0665") is None


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestIsLikelyUpdate:
    @pytest.mark.parametrize(
        "text",
        [
            "A NEW dashboard",
            "Minor update to exports",
            "Release notes",
            "Feature flag support",
            "Performance improvement",
            "We launch today",
            "We announce pricing",
            "Version 2 is live",
            "Bug fix for login",
            "Enhancement to segments",
        ],
    )
    def test_keywords_match(self, text: str) -> None:
        assert is_likely_update(text) is True

    @pytest.mark.parametrize(
        "text",
        ["We launched dark mode", "Renewal reminders", "Features and updates", "Fixed issues"],
    )
    def test_keywords_require_whole_words(self, text: str) -> None:
        assert is_likely_update(text) is False

    def test_word_boundaries_are_ascii(self) -> None:
        assert is_likely_update("new\u00e9 product catalog") is True
        assert is_likely_update("\u00e9new product catalog") is True


# ---------------------------------------------------------------------------
# Title and preview
# ---------------------------------------------------------------------------


class TestTitleAndPreview:
    def test_first_non_blank_line(self) -> None:
        assert derive_title("\n   \n  Heading line  \nbody") == "Heading line"

    def test_no_title_sentinel(self) -> None:
        assert derive_title(" \n\t\n ") == "No title"

    def test_long_title_truncated(self) -> None:
        title = derive_title("t" * 150)
        assert title == "t" * 100 + "..."

    def test_exactly_100_characters_not_truncated(self) -> None:
        assert derive_title("t" * 100) == "t" * 100

    def test_title_is_idempotent_under_limit(self) -> None:
        title = derive_title("Release 4.2 brings scheduled exports\nMore details below")
        assert derive_title(title) == title

    def test_preview_truncated_with_ellipsis(self) -> None:
        items = _normalize(["c" * 600])
        assert items[0].content == "c" * 500 + "..."
        assert items[0].full_content == "c" * 600
        assert items[0].content_length == 600

    def test_preview_untouched_at_500(self) -> None:
        items = _normalize(["d" * 500])
        assert items[0].content == "d" * 500


# ---------------------------------------------------------------------------
# Ids, scenario and ranking
# ---------------------------------------------------------------------------


class TestItemsAndRanking:
    def test_release_scenario(self) -> None:
        text = "New Feature Release\nWe launched dark mode support today. January 5, 2025"
        (item,) = _normalize([text])

        assert item.title == "New Feature Release"
        assert item.is_likely_update is True
        assert item.extracted_date == "January 5, 2025"
        assert item.competitor == "Braze"
        assert item.extracted_at == CAPTURED_AT

    def test_ids_use_pre_filter_index(self) -> None:
        items = _normalize(["too short", "e" * 40, "f" * 35])
        assert {item.id for item in items} == {"braze_1", "braze_2"}

    def test_id_prefix_prefers_competitor_key(self, normalizer: UpdateNormalizer) -> None:
        items = normalizer.normalize(
            records=[_record("g" * 40)],
            competitor_name="Acme Corp",
            competitor_key="ACME",
        )
        assert items[0].id == "acme_0"

    def test_likely_updates_first_then_longer(self) -> None:
        texts = [
            "plain text entry without keywords " + "a" * 10,
            "plain text entry without keywords but longer " + "b" * 40,
            "new thing " + "c" * 25,
            "new thing, a longer one " + "d" * 40,
        ]
        items = _normalize(texts)
        assert [item.id for item in items] == ["braze_3", "braze_2", "braze_1", "braze_0"]

    def test_adjacent_pairs_respect_order(self) -> None:
        texts = [f"entry {i} " + ("update " if i % 2 else "") + "x" * (30 + i * 7) for i in range(12)]
        items = _normalize(texts)
        for first, second in zip(items, items[1:]):
            assert not (second.is_likely_update and not first.is_likely_update)
            if first.is_likely_update == second.is_likely_update:
                assert first.content_length >= second.content_length

    def test_ties_keep_input_order(self) -> None:
        texts = ["first tie " + "a" * 30, "second tie " + "b" * 29, "third tie " + "c" * 30]
        items = _normalize(texts)
        assert [item.id for item in items] == ["braze_0", "braze_1", "braze_2"]

    def test_items_are_frozen(self) -> None:
        (item,) = _normalize(["h" * 40])
        with pytest.raises((AttributeError, TypeError)):
            item.title = "changed"  # type: ignore[misc]
