# wsgi.py (at repo root), e.g. ``gunicorn wsgi:app``
from disaster_dashboard import create_app

app = create_app()
