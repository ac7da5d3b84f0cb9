import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import datagen even if not installed
src_path = str(Path(__file__).parent.parent / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)


@pytest.fixture
def write_config(tmp_path):
    """
    Writes a configuration document to the temp dir and returns its path.
    Dicts are dumped as JSON; strings are written verbatim.
    """
    import json

    def _write(doc, name="table.json"):
        path = tmp_path / name
        if isinstance(doc, str):
            path.write_text(doc, encoding="utf-8")
        else:
            path.write_text(json.dumps(doc), encoding="utf-8")
        return path

    return _write
