"""Allow running as ``python -m locale_key_diff``."""

from locale_key_diff.main import main

main()
