"""
Shared pytest fixtures for the quotation PDF test suite.

Every test gets its own data/output dirs and every image source points at a
file that doesn't exist, so nothing ever reaches the network.
"""
import os
import sys
import pytest

_PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from src.core.settings import ASSET_SETTINGS, _REGISTRY


# ── Temp data directory (per-test isolation) ──────────────────────────────────

@pytest.fixture(autouse=True)
def temp_data_dir(tmp_path, monkeypatch):
    """Redirect data/output dirs to tmp and make every image source unreachable."""
    data = str(tmp_path / "data")
    output = str(tmp_path / "output")
    os.makedirs(data, exist_ok=True)
    os.makedirs(output, exist_ok=True)

    import src.core.paths as paths
    import src.forms.branding as branding
    import src.forms.quotation_pdf as quotation_pdf
    monkeypatch.setattr(paths, "DATA_DIR", data)
    monkeypatch.setattr(paths, "OUTPUT_DIR", output)
    monkeypatch.setattr(paths, "LOG_DIR", os.path.join(data, "logs"))
    monkeypatch.setattr(paths, "BRANDING_PATH", os.path.join(data, "branding.json"))
    monkeypatch.setattr(branding, "BRANDING_PATH", os.path.join(data, "branding.json"))
    monkeypatch.setattr(quotation_pdf, "OUTPUT_DIR", output)

    missing = tmp_path / "missing"
    for name in ASSET_SETTINGS:
        monkeypatch.setenv(_REGISTRY[name]["env"], str(missing / f"{name}.png"))
    for name in ("min_table_rows", "info_split", "watermark_opacity", "asset_timeout"):
        monkeypatch.delenv(_REGISTRY[name]["env"], raising=False)
    return data


@pytest.fixture
def output_dir(temp_data_dir):
    return os.path.join(os.path.dirname(temp_data_dir), "output")


# ── Image assets ──────────────────────────────────────────────────────────────

@pytest.fixture
def png_asset(tmp_path):
    """A small real PNG on disk."""
    from PIL import Image
    path = tmp_path / "brand.png"
    Image.new("RGBA", (64, 28), (15, 61, 102, 255)).save(path)
    return str(path)


@pytest.fixture
def all_assets_available(png_asset, monkeypatch):
    """Point every image source at the real PNG."""
    for name in ASSET_SETTINGS:
        monkeypatch.setenv(_REGISTRY[name]["env"], png_asset)
    return png_asset


# ── Flask test client ─────────────────────────────────────────────────────────

@pytest.fixture
def app(temp_data_dir):
    from app import create_app
    flask_app = create_app(configure_logging=False)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


# ── Sample data factories ─────────────────────────────────────────────────────

def make_features(n, start=1):
    """n priced line items, total_price = quantity × unit_price."""
    feats = []
    for i in range(start, start + n):
        qty = (i % 3) + 1
        price = 100.0 * i
        feats.append({
            "id": i,
            "custom_name": f"Accessory item {i}",
            "feature_type": {"name": f"Type {i}", "hsn_code": "8708"},
            "quantity": qty,
            "unit_price": price,
            "total_price": qty * price,
        })
    return feats


@pytest.fixture
def sample_quotation():
    """Three-item quotation as the backend returns it."""
    return {
        "id": 42,
        "quotation_number": "QT-2024-0042",
        "quotation_date": "2024-05-14",
        "customer": {
            "name": "Shree Ganesh Transport",
            "address": "Plot 12, MIDC Ranjangaon, Tal. Shirur, Dist. Pune 412220",
            "gstin": "27ABCDE1234F1Z5",
        },
        "place_of_supply": "Maharashtra (27)",
        "vehicle_maker": {"name": "Tata"},
        "vehicle_model": {"name": "LPT 1613"},
        "vehicle_number": "MH 16 AY 4521",
        "features": [
            {"id": 1, "custom_name": "Full steel body, 17 ft, with side hinged doors",
             "feature_type": {"name": "Body", "hsn_code": "8707"},
             "quantity": 1, "unit_price": "185000", "total_price": "185000"},
            {"id": 2, "feature_type": {"name": "Rear bumper", "hsn_code": "8708"},
             "quantity": 2, "unit_price": 3250, "total_price": 6500},
            {"id": 3, "feature_category": {"id": 3, "name": "Paint & lettering"},
             "quantity": 1, "unit_price": 12000.5, "total_price": 12000.5},
        ],
    }


@pytest.fixture
def feature_factory():
    return make_features
