"""
Runs scripts/roundtrip_users.py as a separate process, the way it is used.
"""
from __future__ import annotations

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SCRIPT = ROOT / "scripts" / "roundtrip_users.py"
EXPECTED = '[{"name":"Aye Chan","email":"fate.macz@gmail.com"}]'


def _run(cwd: Path) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, str(SCRIPT)],
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=60,
    )


def test_script_success(tmp_path):
    (tmp_path / "backend").mkdir()
    proc = _run(tmp_path)
    assert proc.returncode == 0, proc.stderr
    assert "Aye Chan" in proc.stdout
    assert "fate.macz@gmail.com" in proc.stdout
    assert proc.stderr == ""
    assert (tmp_path / "backend" / "users.json").read_text(encoding="utf-8") == EXPECTED


def test_script_without_backend_dir_aborts(tmp_path):
    proc = _run(tmp_path)
    assert proc.returncode != 0
    assert proc.stdout == ""
    assert "Traceback" in proc.stderr
    assert "FileNotFoundError" in proc.stderr
