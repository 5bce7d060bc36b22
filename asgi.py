"""
asgi.py -- Application assembly for PizzaStore.

Builds the app from the process settings (environment variables and .env).
This is the only place, together with main.py, that calls get_settings().

Run with:  uvicorn asgi:app --reload
           python main.py
"""

from api.main import create_app

app = create_app()
