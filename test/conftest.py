from __future__ import annotations

import os
import tempfile
from pathlib import Path

# Load dotenv files early so the settings model sees test overrides
try:  # pragma: no cover
    from dotenv import load_dotenv

    TEST_ROOT = Path(__file__).resolve().parent
    load_dotenv(TEST_ROOT / ".env", override=False)
except Exception:
    pass

# The application builds its engine and static mount at import time, so these
# must be in place before anything under profilehub.server is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="profilehub-uploads-"))
os.environ.setdefault("LOGFIRE_ENABLED", "false")
Path(os.environ["UPLOAD_DIR"]).mkdir(parents=True, exist_ok=True)
