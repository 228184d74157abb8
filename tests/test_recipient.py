from __future__ import annotations

import pytest

from pdf_processor.recipient import build_safe_filename, parse_recipient_from_text
from pdf_processor.types import Recipient


@pytest.mark.parametrize("text", ["", "   \n  ", "\r\n\t"])
def test_parse_returns_none_for_blank_text(text: str) -> None:
    assert parse_recipient_from_text(text) is None


def test_parse_name_first_last() -> None:
    assert parse_recipient_from_text("Name: Max Mustermann") == Recipient("Max", "Mustermann", "")


def test_parse_name_comma_convention() -> None:
    recipient = parse_recipient_from_text("Rechnungsempfänger: Mustermann, Max")
    assert recipient == Recipient(first_name="Max", last_name="Mustermann", locality="")


def test_parse_label_is_case_insensitive() -> None:
    recipient = parse_recipient_from_text("EMPFÄNGER Erika Musterfrau")
    assert recipient == Recipient("Erika", "Musterfrau", "")


def test_parse_single_token_becomes_last_name() -> None:
    assert parse_recipient_from_text("An: Mustermann") == Recipient("", "Mustermann", "")


def test_parse_multiple_tokens_join_last_name() -> None:
    recipient = parse_recipient_from_text("Name: Karl Theodor von Muster")
    assert recipient.first_name == "Karl"
    assert recipient.last_name == "Theodor von Muster"


def test_parse_label_only_uses_following_lines() -> None:
    recipient = parse_recipient_from_text("Rechnungsadresse\nMax\nMustermann\nMusterstraße 1")
    assert recipient.first_name == "Max"
    assert recipient.last_name == "Mustermann"


def test_parse_label_only_with_single_following_line() -> None:
    recipient = parse_recipient_from_text("Lohnabrechnung\nAn\nMax Mustermann")
    assert recipient == Recipient("Max", "Mustermann", "")


def test_parse_label_needs_word_boundary() -> None:
    assert parse_recipient_from_text("Angebot Nr. 4711") is None


def test_parse_postal_code_locality() -> None:
    recipient = parse_recipient_from_text("Name: Max Mustermann\n12345 Berlin")
    assert recipient == Recipient("Max", "Mustermann", "12345 Berlin")


def test_parse_labelled_locality() -> None:
    recipient = parse_recipient_from_text("Wohnort: Hamburg")
    assert recipient == Recipient("", "", "Hamburg")


def test_parse_locality_only_is_enough() -> None:
    assert parse_recipient_from_text("Musterstraße 5\n80331 München") == Recipient("", "", "80331 München")


def test_first_name_label_wins() -> None:
    text = "Name: Max Mustermann\nEmpfänger: Erika Musterfrau"
    recipient = parse_recipient_from_text(text)
    assert (recipient.first_name, recipient.last_name) == ("Max", "Mustermann")


def test_partial_name_is_replaced_by_later_label() -> None:
    text = "An: Personalabteilung\nName: Max Mustermann"
    recipient = parse_recipient_from_text(text)
    assert (recipient.first_name, recipient.last_name) == ("Max", "Mustermann")


def test_empty_label_keeps_partial_name() -> None:
    assert parse_recipient_from_text("Name: Mustermann\nAn:") == Recipient("", "Mustermann", "")


def test_bare_label_on_last_line_keeps_partial_name() -> None:
    recipient = parse_recipient_from_text("Empfänger: Mustermann\n12345 Berlin\nName")
    assert recipient == Recipient("", "Mustermann", "12345 Berlin")


def test_postal_code_needs_city_with_two_characters() -> None:
    assert parse_recipient_from_text("12345 B") is None
    assert parse_recipient_from_text("12345 Ulm") == Recipient("", "", "12345 Ulm")


def test_last_locality_wins() -> None:
    text = "Absender 10115 Berlin\n20095 Hamburg\nName: Max Mustermann\nOrt: 80331 München"
    recipient = parse_recipient_from_text(text)
    assert recipient.locality == "80331 München"


def test_flattened_line_keeps_locality_in_name() -> None:
    recipient = parse_recipient_from_text("Name: Max Mustermann 12345 Berlin")
    assert recipient == Recipient("Max", "Mustermann 12345 Berlin", "")


def test_parse_returns_none_without_patterns() -> None:
    assert parse_recipient_from_text("Random text without name or address") is None


def test_parse_handles_windows_line_endings() -> None:
    recipient = parse_recipient_from_text("Name: Max Mustermann\r\n12345 Berlin\r\n")
    assert recipient.locality == "12345 Berlin"


def test_build_filename_without_recipient() -> None:
    assert build_safe_filename(None, 0) == "Seite_01.pdf"
    assert build_safe_filename(None, 9) == "Seite_10.pdf"
    assert build_safe_filename(None, 119) == "Seite_120.pdf"


def test_build_filename_from_recipient() -> None:
    recipient = Recipient(first_name="Max", last_name="Mustermann", locality="12345 Berlin")
    assert build_safe_filename(recipient, 0) == "Mustermann_Max_12345_Berlin.pdf"


def test_build_filename_skips_empty_parts() -> None:
    assert build_safe_filename(Recipient("", "Mustermann", ""), 3) == "Mustermann.pdf"
    assert build_safe_filename(Recipient("", "", "Hamburg"), 3) == "Hamburg.pdf"


def test_build_filename_sanitizes_unsafe_characters() -> None:
    name = build_safe_filename(Recipient("Max", "Mustermann", "Berlin (West)"), 0)
    assert name.endswith(".pdf")
    assert "(" not in name
    assert ")" not in name
    assert name == "Mustermann_Max_Berlin__West_.pdf"


def test_build_filename_keeps_umlauts() -> None:
    name = build_safe_filename(Recipient("Jürgen", "Müller-Lüdenscheidt", "Köln"), 0)
    assert name == "Müller-Lüdenscheidt_Jürgen_Köln.pdf"


def test_build_filename_replaces_other_unicode_letters() -> None:
    name = build_safe_filename(Recipient("José", "Nuñez", ""), 0)
    assert name == "Nu_ez_Jos_.pdf"


def test_build_filename_truncates_long_names() -> None:
    name = build_safe_filename(Recipient("", "x" * 300, ""), 0)
    assert name == "x" * 120 + ".pdf"


def test_build_filename_respects_custom_length() -> None:
    name = build_safe_filename(Recipient("Max", "Mustermann", ""), 0, max_length=5)
    assert name == "Muste.pdf"


def test_build_filename_falls_back_for_empty_recipient() -> None:
    assert build_safe_filename(Recipient("", "", ""), 4) == "Seite_05.pdf"


def test_build_filename_is_deterministic() -> None:
    recipient = Recipient("Max", "Mustermann", "12345 Berlin")
    assert build_safe_filename(recipient, 0) == build_safe_filename(recipient, 7)
