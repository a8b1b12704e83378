# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from laptop_stats.logging.init import reset_logging

SAMPLE_CSV = """laptop_ID,Company,Product,TypeName,Inches,ScreenResolution,Cpu,Ram,Memory,Gpu,OpSys,Weight,Price_euros
1,Apple,MacBook Pro,Ultrabook,13.3,IPS Panel Retina Display 2560x1600,Intel Core i5 2.3GHz,8GB,128GB SSD,Intel Iris Plus Graphics 640,macOS,1.37kg,"71,378"
2,HP,250 G6,Notebook,15.6,Full HD 1920x1080,Intel Core i5 7200U 2.5GHz,8GB,256GB SSD,Intel HD Graphics 620,No OS,1.86kg,"30,636"
3,Dell,Inspiron 3567,Notebook,15.6,Full HD 1920x1080,Intel Core i3 6006U 2GHz,4GB,1TB HDD,AMD Radeon R5 M430,Windows 10,2.2kg,"26,000"
4,HP,Pavilion 15,Notebook,15.6,Full HD 1920x1080,Intel Core i7 8550U 1.8GHz,16GB,512GB SSD,Nvidia GeForce MX150,Windows 10,1.91kg,"60,000"
5,Acer,Aspire 3,Notebook,15.6,1366x768,AMD A9-Series 9420 3GHz,4GB,500GB HDD,AMD Radeon R5,Windows 10,2.1kg,0
"""


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("LAPTOP_STATS_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_csv_text() -> str:
    return SAMPLE_CSV


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
encoding: utf-8-sig
currency:
  symbol: "₹"
  grouping: indian
report:
  top_companies: 3
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "laptop_stats.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_csv_file(temp_workdir: Path, sample_csv_text: str) -> Path:
    f = temp_workdir / "data" / "laptops.csv"
    f.write_text(sample_csv_text, encoding="utf-8")
    return f
