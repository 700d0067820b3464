from __future__ import annotations

import json
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def config_store(tmp_path: Path):
    """
    ConfigStore rooted at a temp install directory so tests never touch a real config/.
    """
    from configtools import ConfigStore

    return ConfigStore(tmp_path)


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    path = tmp_path / "web.config"
    path.write_text(
        """<?xml version="1.0" encoding="utf-8"?>
<configuration>
  <!-- keep me -->
  <startup>
    <supportedRuntime version="v4.0" />
  </startup>
  <appSettings>
    <add key="Existing" value="old" />
  </appSettings>
  <connectionStrings>
    <add name="Main" connectionString="Server=a;Database=b" providerName="System.Data.SqlClient" />
  </connectionStrings>
</configuration>
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def json_file(tmp_path: Path) -> Path:
    path = tmp_path / "appsettings.json"
    doc = {
        "ConnectionStrings": {"Default": "Server=a"},
        "Logging": {"LogLevel": {"Default": "Information"}},
        "A": {"B": {"C": {"D": {"E": "deep"}}}},
        "Hosts": [{"Name": "one"}, {"Name": "two"}],
    }
    path.write_text(json.dumps(doc, indent=2), encoding="utf-8")
    return path
