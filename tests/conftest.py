import os
import sys
from pathlib import Path

# Ensure the src directory is on the path for imports
root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root / 'src'))

log_dir = root / "logs"
log_dir.mkdir(parents=True, exist_ok=True)
os.environ.setdefault("EIGIX_LOG_DIR", str(log_dir))
# Keep persisted settings from the developer's home out of the test run
os.environ.setdefault("EIGIX_CONFIG_DIR", str(log_dir / "config"))
