import sys
import pathlib

import pytest

# Make project root importable
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # load_dotenv writes os.environ directly; register the key so it is restored
    monkeypatch.setenv("OPEN_API_KEY", "")
    monkeypatch.delenv("OPEN_API_KEY")
    monkeypatch.chdir(tmp_path)
