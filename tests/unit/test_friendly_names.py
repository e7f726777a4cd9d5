"""Tests for friendly-name resolution."""

import logging

import pytest

from sclogparser.data.friendly_names import FriendlyNames, strip_id_suffix


class TestStripIdSuffix:
    """Tests for numeric id suffix removal."""

    def test_strips_trailing_digits(self):
        assert strip_id_suffix("HRST_LaserBeam_Bespoke_4510244335981") == "HRST_LaserBeam_Bespoke"

    def test_only_last_suffix(self):
        assert strip_id_suffix("Name_123_456") == "Name_123"

    def test_keeps_inner_digits(self):
        assert strip_id_suffix("behr_lmg_ballistic_01_B") == "behr_lmg_ballistic_01_B"

    def test_keeps_name_without_underscore(self):
        assert strip_id_suffix("Stanton1") == "Stanton1"


class TestResolve:
    """Tests for FriendlyNames.resolve."""

    def test_miss_returns_stripped_code(self):
        names = FriendlyNames.empty()
        assert names.resolve("HRST_LaserBeam_Bespoke_4510244335981") == "HRST_LaserBeam_Bespoke"

    def test_hit_after_stripping(self):
        names = FriendlyNames({"MISC_Starlancer_TAC": "Starlancer TAC"})
        assert names.resolve("MISC_Starlancer_TAC_4528531523558") == "Starlancer TAC"

    def test_lookup_is_case_insensitive(self):
        names = FriendlyNames({"misc_starlancer_tac": "Starlancer TAC"})
        assert names.resolve("MISC_Starlancer_TAC") == "Starlancer TAC"

    def test_miss_keeps_case(self):
        names = FriendlyNames({"other": "Other"})
        assert names.resolve("Rydianna") == "Rydianna"

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_blank_returned_unchanged(self, raw):
        assert FriendlyNames.empty().resolve(raw) == raw

    def test_callable(self):
        names = FriendlyNames({"pyro1": "Pyro I"})
        assert names("pyro1") == "Pyro I"

    def test_contains(self):
        names = FriendlyNames({"pyro1": "Pyro I"})
        assert "PYRO1" in names
        assert "stanton1" not in names

    def test_with_overrides_returns_new_table(self):
        base = FriendlyNames({"pyro1": "Pyro I", "Stanton1": "Hurston"})
        custom = base.with_overrides({"PYRO1": "Pyro One"})
        assert custom.resolve("pyro1") == "Pyro One"
        assert custom.resolve("Stanton1") == "Hurston"
        assert base.resolve("pyro1") == "Pyro I"

    def test_table_is_read_only(self):
        source = {"pyro1": "Pyro I"}
        names = FriendlyNames(source)
        source["pyro1"] = "changed"
        assert names.resolve("pyro1") == "Pyro I"


class TestLoad:
    """Tests for FriendlyNames.load."""

    def test_loads_json_file(self, fixtures_dir):
        names = FriendlyNames.load(fixtures_dir / "friendly_names.json")
        assert len(names) == 3
        assert names.resolve("behr_lmg_ballistic_01_4530103770551") == "FS-9 LMG"

    def test_loads_bundled_table(self):
        names = FriendlyNames.load()
        assert len(names) > 0
        assert names.resolve("MISC_Starlancer_TAC_4528531523558") == "MISC Starlancer TAC"

    def test_missing_file_gives_empty_table(self, tmp_path):
        names = FriendlyNames.load(tmp_path / "nope.json")
        assert len(names) == 0

    def test_invalid_json_gives_empty_table(self, tmp_path, caplog):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.ERROR, logger="sclogparser"):
            names = FriendlyNames.load(path)
        assert len(names) == 0
        assert "Failed to load friendly names" in caplog.text

    def test_non_object_json_gives_empty_table(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text('["a", "b"]', encoding="utf-8")
        assert len(FriendlyNames.load(path)) == 0

    def test_reload_builds_new_snapshot(self, tmp_path):
        path = tmp_path / "names.json"
        path.write_text('{"pyro1": "Pyro I"}', encoding="utf-8")
        first = FriendlyNames.load(path)
        path.write_text('{"pyro1": "Pyro One"}', encoding="utf-8")
        second = FriendlyNames.load(path)
        assert first.resolve("pyro1") == "Pyro I"
        assert second.resolve("pyro1") == "Pyro One"
