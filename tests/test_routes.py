"""
Integration tests for the quotation Flask routes.
"""
import os

import pytest

import src.api.routes_quotation as routes


# ═══════════════════════════════════════════════════════════════════════════════
# RENDER
# ═══════════════════════════════════════════════════════════════════════════════

class TestQuotationPdf:

    def test_returns_pdf_attachment(self, client, sample_quotation):
        r = client.post("/api/quotations/pdf", json=sample_quotation)
        assert r.status_code == 200
        assert r.mimetype == "application/pdf"
        assert r.data.startswith(b"%PDF-")
        assert "Quotation_QT-2024-0042.pdf" in r.headers["Content-Disposition"]
        assert r.headers["X-Quotation-Pages"] == "1"

    def test_nothing_written_to_disk(self, client, sample_quotation, output_dir):
        client.post("/api/quotations/pdf", json=sample_quotation)
        assert os.listdir(output_dir) == []

    def test_same_number_requests_are_independent(self, client, sample_quotation):
        other = dict(sample_quotation, features=sample_quotation["features"][:1])
        a = client.post("/api/quotations/pdf", json=sample_quotation)
        b = client.post("/api/quotations/pdf", json=other)
        again = client.post("/api/quotations/pdf", json=sample_quotation)
        assert a.data != b.data
        assert a.data == again.data

    def test_reports_skipped_images(self, client, sample_quotation):
        r = client.post("/api/quotations/pdf", json=sample_quotation)
        assert "logo_source" in r.headers["X-Skipped-Assets"].split(",")

    def test_no_skipped_header_when_images_load(self, client, sample_quotation,
                                                all_assets_available):
        r = client.post("/api/quotations/pdf", json=sample_quotation)
        assert r.status_code == 200
        assert "X-Skipped-Assets" not in r.headers

    def test_non_json_body(self, client):
        r = client.post("/api/quotations/pdf", data="hello", content_type="text/plain")
        assert r.status_code == 400
        assert r.get_json()["ok"] is False

    def test_json_list_rejected(self, client):
        r = client.post("/api/quotations/pdf", json=[1, 2, 3])
        assert r.status_code == 400

    def test_missing_number(self, client, sample_quotation):
        del sample_quotation["quotation_number"]
        r = client.post("/api/quotations/pdf", json=sample_quotation)
        assert r.status_code == 400
        assert "quotation_number" in r.get_json()["error"]

    def test_render_failure_is_500(self, client, sample_quotation, monkeypatch):
        def boom(*a, **kw):
            raise RuntimeError("disk full")
        monkeypatch.setattr(routes, "render_quotation", boom)
        r = client.post("/api/quotations/pdf", json=sample_quotation)
        assert r.status_code == 500
        assert r.get_json() == {"ok": False, "error": "disk full"}


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH
# ═══════════════════════════════════════════════════════════════════════════════

class TestHealth:

    def test_health_ok(self, client):
        r = client.get("/api/health")
        assert r.status_code == 200
        d = r.get_json()
        assert d["ok"] is True
        assert "OUTPUT_DIR" in d["paths"]["resolved"]
        assert d["settings"]["total"] == len(d["settings"]["settings"])
