import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

STATIC_DIR = Path(__file__).resolve().parent / "static"

SHEET_CSV_URL = os.getenv(
    "SHEET_CSV_URL",
    "https://docs.google.com/spreadsheets/d/1A3MsvJuBJtAnVzaFrm46sF0BqY7wfQ9b4CyUNtJzWug"
    "/gviz/tq?tqx=out:csv&sheet=Sheet1",
)

# Seconds; unset means wait for the sheet indefinitely
_timeout = os.getenv("GOALS_FETCH_TIMEOUT", "")
GOALS_FETCH_TIMEOUT = float(_timeout) if _timeout else None

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
