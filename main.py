import sys
from pathlib import Path

from dotenv import load_dotenv
import uvicorn

load_dotenv()

backend_path = Path(__file__).parent / "backend"
sys.path.insert(0, str(backend_path))

from config import API_HOST, API_PORT  # noqa: E402

if __name__ == '__main__':
    uvicorn.run("app:app",
                app_dir=str(backend_path),
                host=API_HOST,
                port=API_PORT,
                reload=True)
