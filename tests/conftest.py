import os
import sys
import tempfile

# Ensure the src directory is on sys.path so tests can import dost_admin.*
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if ROOT not in sys.path:
	sys.path.insert(0, ROOT)

# Handler modules wire their services at import time; keep them in demo mode.
for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY"):
	os.environ.pop(name, None)

os.environ.setdefault(
	"DOST_PREFERENCES_PATH",
	os.path.join(tempfile.mkdtemp(prefix="dost_admin_"), "preferences.json"),
)
