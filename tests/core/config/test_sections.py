# tests/core/config/test_sections.py
"""
Testes da resolução de visibilidade de seções.

Este módulo valida:
- a função pura `visibility` sobre modos já finalizados
- a finalização de `show_all`/`hide_all` a partir do uso explícito de flags
- o cache de visibilidade calculado na normalização

Invariantes:
    - Com show-all ativo, somente `hide` oculta seções
    - Sem modo "all" ativo, a política é default-deny e `show` vence `hide`
    - `finalize_modes` depende apenas do rastreador, nunca altera listas
"""

import pytest

from tfdocs.core.config import (
    LegacySections,
    Section,
    Sections,
    compute_visibility,
    finalize_modes,
    visibility,
)


@pytest.mark.parametrize("section", list(Section))
def test_show_all_makes_every_section_visible(section):
    sections = Sections(show_all=True, hide_all=False)
    assert visibility(sections, section) is True


@pytest.mark.parametrize("section", list(Section))
def test_show_all_respects_hide(section):
    sections = Sections(show_all=True, hide_all=False, hide=[section.value])
    assert visibility(sections, section) is False


def test_show_all_with_empty_lists_shows_everything():
    """Cenário: show=[], hide=[], show_all, sem hide_all → tudo visível."""
    sections = Sections(show=[], hide=[], show_all=True, hide_all=False)
    assert compute_visibility(sections) == {s: True for s in Section}


def test_show_list_without_all_modes_shows_only_listed():
    """Cenário: show=[inputs, outputs] sem modos "all" → apenas essas visíveis."""
    sections = Sections(show=["inputs", "outputs"], show_all=False, hide_all=False)
    resolved = compute_visibility(sections)
    assert resolved == {
        Section.HEADER: False,
        Section.INPUTS: True,
        Section.OUTPUTS: True,
        Section.PROVIDERS: False,
        Section.REQUIREMENTS: False,
    }


def test_show_wins_over_hide_when_no_all_mode():
    sections = Sections(show=["inputs"], hide=["inputs"], show_all=False, hide_all=False)
    assert visibility(sections, Section.INPUTS) is True


def test_default_deny_without_all_modes():
    sections = Sections(show_all=False, hide_all=False)
    assert all(visibility(sections, s) is False for s in Section)


def test_both_all_modes_fall_back_to_lists():
    sections = Sections(show=["header"], show_all=True, hide_all=True)
    assert visibility(sections, "header") is True
    assert visibility(sections, "inputs") is False


def test_visibility_accepts_plain_names():
    sections = Sections(hide=["providers"])
    assert sections.visibility("providers") is False
    assert sections.visibility("requirements") is True


def test_visibility_rejects_unknown_section():
    with pytest.raises(ValueError):
        visibility(Sections(), "resources")


# -----------------------------
# finalize_modes
# -----------------------------

def test_hide_all_disables_implicit_show_all(changed):
    sections = Sections(show_all=True, hide_all=True)
    finalize_modes(sections, changed("hide-all"))
    assert sections.show_all is False
    assert sections.hide_all is True


def test_explicit_show_all_is_kept_with_hide_all(changed):
    sections = Sections(show_all=True, hide_all=True)
    finalize_modes(sections, changed("show-all", "hide-all"))
    assert sections.show_all is True
    assert sections.hide_all is True


def test_show_all_false_implies_hide_all(changed):
    sections = Sections(show_all=False, hide_all=False)
    finalize_modes(sections, changed("show-all"))
    assert sections.hide_all is True


def test_explicit_hide_all_false_is_kept(changed):
    sections = Sections(show_all=False, hide_all=False)
    finalize_modes(sections, changed("show-all", "hide-all"))
    assert sections.show_all is False
    assert sections.hide_all is False


def test_defaults_are_unchanged_by_finalize(changed):
    sections = Sections()
    finalize_modes(sections, changed())
    assert sections.show_all is True
    assert sections.hide_all is False


def test_finalize_does_not_touch_lists(changed):
    sections = Sections(show=["inputs"], hide=["outputs"], show_all=False)
    finalize_modes(sections, changed())
    assert sections.show == ["inputs"]
    assert sections.hide == ["outputs"]


# -----------------------------
# compute_visibility (cache)
# -----------------------------

def test_is_visible_is_false_before_normalization():
    sections = Sections()
    assert sections.is_visible(Section.HEADER) is False


def test_compute_visibility_fills_cache():
    sections = Sections(hide=["requirements"])
    compute_visibility(sections)
    assert sections.is_visible("header") is True
    assert sections.is_visible(Section.REQUIREMENTS) is False


def test_legacy_no_section_leaves_cache_alone():
    """
    Uma flag `--no-<section>` verdadeira não altera a visibilidade
    calculada nem a lista `hide`.
    """
    sections = Sections(deprecated=LegacySections(no_header=True))
    compute_visibility(sections)
    assert sections.is_visible(Section.HEADER) is True
    assert sections.is_visible(Section.INPUTS) is True
    assert sections.hide == []
    assert visibility(sections, Section.HEADER) is True


def test_section_legacy_flag_names():
    assert [s.legacy_flag.value for s in Section] == [
        "no-header",
        "no-inputs",
        "no-outputs",
        "no-providers",
        "no-requirements",
    ]
