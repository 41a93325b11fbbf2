import sys
from pathlib import Path

# ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient
from tasktracker.main import app
from tasktracker.utils.auth import create_token

identity = sys.argv[1] if len(sys.argv) > 1 else "quick-test-principal"
headers = {"Authorization": f"Bearer {create_token(identity)}"}

client = TestClient(app)
r = client.post("/users", json={"name": "Quick Test", "email": "quick_test_user@example.com"}, headers=headers)
print('status', r.status_code)
try:
    print('json:', r.json())
except Exception:
    print('text:', r.text)
