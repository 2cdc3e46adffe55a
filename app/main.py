# app/main.py
"""
Process entry point.

    uvicorn app.main:app --host 0.0.0.0 --port 8080
    python -m app.main
"""
import uvicorn

from app.adapters.api.main import create_app
from app.shared.config import settings

# Entry point for Uvicorn
app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
