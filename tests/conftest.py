import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

# Allow `import soundcanvas` from a source checkout.
_SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))
