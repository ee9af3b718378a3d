"""UI Entry point."""
import sys
from pathlib import Path

# Ensure the package is importable when run from a checkout
root = Path(__file__).parent.resolve()
sys.path.insert(0, str(root))

from style_editor.ui.app import main

if __name__ == "__main__":
    main()
