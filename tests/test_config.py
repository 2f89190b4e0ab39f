import pytest

from config import Settings, load_catalog


def test_load_catalog_reads_products(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "products:\n"
        "  - id: 1\n"
        "    name: Lamp\n"
        "    price: 19.5\n"
        "    category: home\n"
        "  - id: sku-2\n"
        "    name: Rug\n"
        "    price: 80\n",
        encoding="utf-8",
    )
    items = load_catalog(path)
    assert [i.id for i in items] == [1, "sku-2"]
    assert items[0].category == "home"
    assert items[1].category == "general"


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "missing.yaml")


def test_load_catalog_requires_products_key(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text("items: []\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_catalog(path)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("MAX_QUANTITY", "5")
    monkeypatch.setenv("DEFAULT_THEME", "dark")
    settings = Settings()
    assert settings.max_quantity == 5
    assert settings.default_theme == "dark"
    assert settings.confirmation_delay == 2.0
