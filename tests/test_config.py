"""
Tests for settings.py, paths.py, branding.py and logging_config.py.
"""
import json
import os

import pytest

from src.core import paths
from src.core.settings import get_setting, asset_sources, validate_all, ASSET_SETTINGS
from src.forms.branding import load_branding, DEFAULT_BRANDING


# ═══════════════════════════════════════════════════════════════════════════════
# Settings
# ═══════════════════════════════════════════════════════════════════════════════

class TestSettings:

    def test_defaults(self):
        assert get_setting("min_table_rows") == 10
        assert get_setting("info_split") == 0.65
        assert get_setting("watermark_opacity") == 0.1
        assert get_setting("asset_timeout") == 5.0

    def test_env_override_read_at_call_time(self, monkeypatch):
        monkeypatch.setenv("QUOTE_MIN_TABLE_ROWS", "14")
        assert get_setting("min_table_rows") == 14

    def test_bad_type_falls_back(self, monkeypatch):
        monkeypatch.setenv("QUOTE_MIN_TABLE_ROWS", "lots")
        assert get_setting("min_table_rows") == 10

    def test_out_of_range_falls_back(self, monkeypatch):
        monkeypatch.setenv("QUOTE_INFO_SPLIT", "0.95")
        assert get_setting("info_split") == 0.65

    def test_negative_int_falls_back(self, monkeypatch):
        monkeypatch.setenv("QUOTE_MIN_TABLE_ROWS", "-3")
        assert get_setting("min_table_rows") == 10

    def test_unknown_setting(self):
        with pytest.raises(KeyError):
            get_setting("no_such_thing")

    def test_asset_sources_cover_every_image(self):
        sources = asset_sources()
        assert set(sources) == set(ASSET_SETTINGS)
        assert all(sources.values())

    def test_validate_all_reports_overrides(self):
        report = validate_all()
        assert report["total"] == len(report["settings"])
        # conftest points every image at a missing local file
        assert report["overridden"] == len(ASSET_SETTINGS)
        assert report["settings"]["min_table_rows"]["overridden"] is False


# ═══════════════════════════════════════════════════════════════════════════════
# Paths
# ═══════════════════════════════════════════════════════════════════════════════

class TestPaths:

    def test_validate_paths_ok_with_writable_output(self):
        result = paths.validate_paths()
        assert result["ok"] is True
        assert result["resolved"]["OUTPUT_DIR"] == paths.OUTPUT_DIR
        assert not os.path.exists(os.path.join(paths.OUTPUT_DIR, ".write_test"))

    def test_missing_branding_is_only_a_warning(self):
        result = paths.validate_paths()
        assert any("BRANDING_PATH" in w for w in result["warnings"])
        assert not any("BRANDING_PATH" in e for e in result["errors"])


# ═══════════════════════════════════════════════════════════════════════════════
# Branding
# ═══════════════════════════════════════════════════════════════════════════════

class TestBranding:

    def test_defaults_without_file(self):
        assert load_branding() == DEFAULT_BRANDING

    def test_defaults_are_copied(self):
        b = load_branding()
        b["company"]["phone"] = "000"
        assert DEFAULT_BRANDING["company"]["phone"] == "9850523224"

    def test_override_merges_nested(self, temp_data_dir):
        with open(os.path.join(temp_data_dir, "branding.json"), "w") as f:
            json.dump({"bank": {"account_no": "1111"}, "currency": "INR"}, f)
        b = load_branding()
        assert b["bank"]["account_no"] == "1111"
        assert b["bank"]["ifsc"] == "MAHB0000254"
        assert b["currency"] == "INR"
        assert b["company"] == DEFAULT_BRANDING["company"]

    def test_malformed_file_uses_defaults(self, temp_data_dir):
        with open(os.path.join(temp_data_dir, "branding.json"), "w") as f:
            f.write("{not json")
        assert load_branding() == DEFAULT_BRANDING

    def test_non_object_file_uses_defaults(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        assert load_branding(str(path)) == DEFAULT_BRANDING


# ═══════════════════════════════════════════════════════════════════════════════
# Logging
# ═══════════════════════════════════════════════════════════════════════════════

class TestLogging:

    def test_json_formatter_keeps_quotation_fields(self):
        import logging
        from logging_config import JSONFormatter
        record = logging.LogRecord("quotation_pdf", logging.INFO, __file__, 1,
                                   "generated %s", ("QT-1",), None)
        record.quotation_number = "QT-1"
        record.pages = 2
        entry = json.loads(JSONFormatter().format(record))
        assert entry["msg"] == "generated QT-1"
        assert entry["quotation_number"] == "QT-1"
        assert entry["pages"] == 2
        assert "route" not in entry

    def test_setup_writes_rotating_file(self, tmp_path):
        import logging
        from logging_config import setup_logging
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(level="INFO", json_logs=True, log_dir=str(tmp_path / "logs"))
            assert os.path.exists(tmp_path / "logs" / "quotation.log")
        finally:
            for h in root.handlers:
                h.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_timed_logs_duration_and_fields(self, caplog):
        import logging
        from logging_config import timed
        logger = logging.getLogger("quotation_pdf")
        with caplog.at_level(logging.INFO, logger="quotation_pdf"):
            with timed(logger, "Quotation QT-9 rendered", quotation_number="QT-9") as fields:
                fields["pages"] = 2
        record = caplog.records[-1]
        assert record.getMessage().startswith("Quotation QT-9 rendered in ")
        assert record.quotation_number == "QT-9"
        assert record.pages == 2
        assert record.duration_ms >= 0

    def test_timed_reraises_and_warns(self, caplog):
        import logging
        from logging_config import timed
        logger = logging.getLogger("quotation_pdf")
        with caplog.at_level(logging.INFO, logger="quotation_pdf"):
            with pytest.raises(RuntimeError):
                with timed(logger, "Quotation QT-9 rendered"):
                    raise RuntimeError("boom")
        record = caplog.records[-1]
        assert record.levelname == "WARNING"
        assert "failed after" in record.getMessage()

    def test_render_logs_duration(self, caplog, sample_quotation):
        import logging
        from src.forms.quotation_pdf import render_quotation
        with caplog.at_level(logging.INFO, logger="quotation_pdf"):
            render_quotation(sample_quotation)
        timed_records = [r for r in caplog.records if hasattr(r, "duration_ms")]
        assert timed_records
        assert timed_records[0].quotation_number == "QT-2024-0042"
        assert timed_records[0].pages == 1

    def test_human_formatter_tags_quotation(self):
        import logging
        from logging_config import HumanFormatter
        record = logging.LogRecord("quotation_pdf", logging.INFO, __file__, 1, "saved", (), None)
        record.quotation_number = "QT-7"
        assert "quotation_pdf [QT-7]: saved" in HumanFormatter().format(record)
