import json

import pytest

from igo_study.io import note_loader, save_sgf
from igo_study.io.settings import Settings, load_settings, save_settings


def test_page_from_text_reads_frontmatter():
    text = "---\ntags: ['#tsumego', igo-problem]\nanswer: [C7, pd]\nigo_problem: true\ncompleted: true\n---\nbody\n"
    page = note_loader.page_from_text("/vault/Problem 1.md", text)
    assert page.name == "Problem 1"
    assert page.tags == ["tsumego", "igo-problem"]
    assert page.answer == ["C7", "pd"]
    assert page.is_problem
    assert page.completed


def test_page_without_frontmatter():
    page = note_loader.page_from_text("/vault/p.md", "# Title\n```sgf\n(;B[aa])\n```\n")
    assert page.tags == []
    assert page.properties == {}
    assert page.answer is None
    assert not page.is_problem


def test_single_tag_and_non_mapping_frontmatter():
    page = note_loader.page_from_text("/vault/p.md", "---\ntags: tsumego\n---\n")
    assert page.tags == ["tsumego"]
    frontmatter, body = note_loader.split_frontmatter("---\n- a\n- b\n---\nbody")
    assert frontmatter == {}
    assert body == "body"


def test_malformed_frontmatter_is_ignored():
    frontmatter, body = note_loader.split_frontmatter("---\nanswer: [C7\n---\nbody")
    assert frontmatter == {}
    assert body == "body"


def test_read_note(tmp_path):
    path = tmp_path / "p.md"
    path.write_text("---\nanswer: pd\n---\ntext", encoding="utf-8")
    page, text = note_loader.read_note(str(path))
    assert page.answer == "pd"
    assert text.endswith("text")


def test_find_companion_prefers_sgf_path(tmp_path):
    (tmp_path / "games").mkdir()
    (tmp_path / "games" / "g.sgf").write_text("(;)", encoding="utf-8")
    (tmp_path / "p.sgf").write_text("(;)", encoding="utf-8")

    page = note_loader.NotePage("p", str(tmp_path / "p.md"), properties={"sgf_path": "games/g.sgf"})
    assert note_loader.find_companion_sgf(page) == str(tmp_path / "games" / "g.sgf")

    page = note_loader.NotePage("p", str(tmp_path / "p.md"))
    assert note_loader.find_companion_sgf(page) == str(tmp_path / "p.sgf")

    page = note_loader.NotePage("q", str(tmp_path / "q.md"))
    assert note_loader.find_companion_sgf(page) is None


def test_board_block_and_embed_link():
    assert save_sgf.board_block("(;B[aa])", 1) == "```sgf\n<!-- move=1 -->\n(;B[aa])\n```"
    assert save_sgf.embed_link("p.sgf", 3) == "![[p.sgf|move=3]]"


def test_save_sgf(tmp_path):
    path = tmp_path / "trial.sgf"
    save_sgf.save_sgf("(;B[aa];W[bb])", str(path))
    assert path.read_text(encoding="utf-8") == "(;B[aa];W[bb])"


def test_settings_defaults_and_merge(tmp_path):
    assert load_settings(None) == Settings("igo-problem", "pd")
    assert load_settings(str(tmp_path / "missing.json")) == Settings()

    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"default_answer": "dd", "unknown": 1}), encoding="utf-8")
    settings = load_settings(str(path))
    assert settings.default_answer == "dd"
    assert settings.problem_tag == "igo-problem"


def test_settings_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    save_settings(Settings("tsumego", "cc"), str(path))
    assert load_settings(str(path)) == Settings("tsumego", "cc")


def test_settings_file_must_hold_object(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(str(path))


def test_is_listed_by_flag_or_tag():
    flagged = note_loader.NotePage("a", "/v/a.md", properties={"igo_problem": True})
    tagged = note_loader.NotePage("b", "/v/b.md", tags=["Igo-Problem/life-and-death"])
    other = note_loader.NotePage("c", "/v/c.md", tags=["recipes"])

    assert note_loader.is_listed(flagged, "igo-problem")
    assert note_loader.is_listed(tagged, "igo-problem")
    assert note_loader.is_listed(tagged, "LIFE")
    assert not note_loader.is_listed(other, "igo-problem")


def test_empty_filter_lists_only_flagged_notes():
    flagged = note_loader.NotePage("a", "/v/a.md", properties={"igo_problem": True})
    tagged = note_loader.NotePage("b", "/v/b.md", tags=["igo-problem"])
    assert note_loader.is_listed(flagged, "")
    assert not note_loader.is_listed(tagged, "")


def test_list_problems_uses_filter_tag(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "p1.md").write_text("---\ntags: [igo-problem]\ncompleted: true\n---\n", encoding="utf-8")
    (tmp_path / "sub" / "p2.md").write_text("---\nigo_problem: true\n---\n", encoding="utf-8")
    (tmp_path / "diary.md").write_text("---\ntags: [diary]\n---\n", encoding="utf-8")
    (tmp_path / "p3.sgf").write_text("(;)", encoding="utf-8")

    pages = note_loader.list_problems(str(tmp_path), "igo-problem")
    assert [page.name for page in pages] == ["p1", "p2"]
    assert note_loader.completion_percentage(pages) == 50
    assert note_loader.completion_percentage([]) == 0
