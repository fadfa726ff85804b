from __future__ import annotations

# Entrypoint kept at the repo root so "python app.py" and "flask --app app run"
# work from a checkout. The Flask host itself lives in guess_core/web.py.

from guess_core.web import app, main  # noqa: F401

if __name__ == "__main__":
    raise SystemExit(main())
