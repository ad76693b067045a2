# run.py
import sys

from index_settings_exporter.main import main

if __name__ == "__main__":
    sys.exit(main())
